# pebbleshell

Building blocks for a small POSIX-style interactive shell. Each stage a command
line passes through has its own module. You can use and test each one on its own.
The package has no dependencies outside the standard library.

## Modules

- **`pebbleshell.tokenizer`**
  - `tokenize(text)` splits a line into a list of `Token` objects. Each token has a
    `type` (a `TokenType`) and, for words, a `value`.
  - The operators recognised are `|`, `||`, `&&`, `<`, `>`, `<<`, `>>`, `(` and `)`.
  - `ShellSyntaxError` (a `ValueError`) is raised in three cases: an unclosed quote,
    a run of redirection characters such as `<>`, `><` or `>x>`, or a character
    that cannot start a token.
  - `process_value(text, start)` reads a single word and returns it together with
    the position where it ends.

- **`pebbleshell.expansion`**
  - `transform_arg(value, environment, exit_code=0, directory=".")` expands one
    token value into an `ExpandedWord`, which has the fields `text` and `literal`.
  - Single-quoted parts are kept as they are, and `literal` is then set.
  - `$NAME` is replaced by its value. A name is made of letters and digits only.
    An unset name is left as written.
  - `$?` gives `exit_code`.
  - `*` is matched against the names in `directory`.
  - Helper functions: `expand_variable`, `match_pattern`, `search_with_wildcards`,
    `handle_wildcards`, `add_quotes` and `count_single_quotes`.

- **`pebbleshell.environment`**
  - `Environment` holds the variables as `NAME=value` strings. It also holds the
    `declare -x` lines that `export` lists.
  - `Environment.from_environ(input_env, cwd)` accepts a mapping or a list of
    `NAME=value` strings. It adds `PWD` when that is missing and increments `SHLVL`.
  - Other methods: `find`, `value`, `is_exported`, `set`, `declare`, `unset`,
    `sorted_exports` and `increment_shlvl`.
  - `export_line(entry)` formats an entry the way `export` prints it.

- **`pebbleshell.builtins`**
  - `echo`, `cd`, `pwd`, `export`, `unset`, `env` and `exit` operate on a
    `ShellState`. A `ShellState` holds the environment, the last exit code and the
    output and error streams.
  - `builtin_kind(args)` returns a `Builtin`. `Builtin.NONE` is false.
  - `execute_builtin(state, args, kind)` runs the builtin and returns the exit code.
  - `exit` raises `ShellExit`, and its `code` is the status to stop with.

- **`pebbleshell.executor`**
  - `run_command(args, environment)` looks the program up on the environment's
    `PATH`, runs it and waits for it to finish.
  - It returns the status the shell reports:
    - 127 when the command is not found.
    - 126 when permission is denied or the name is a directory.
    - 128 + 15 when the program is killed by SIGTERM.
  - `candidate_paths`, `command_error` (which builds a `CommandError`) and
    `exit_status` expose the individual steps.

- **`pebbleshell.redirect`**
  - `open_redirect(kind, filename)` opens the file for `RedirectKind.LESS`,
    `GREAT` or `DGREAT`.
  - `read_heredoc(lines, delimiter, environment)` collects here-document lines up
    to the delimiter. It raises `RedirectError` if the input runs out first.
  - `is_ambiguous` detects redirect targets that are ambiguous.

- **`pebbleshell.prompt`**
  - `get_prompt(cwd=None, fancy=False)` builds `minishell /<last dir> > `. With
    `fancy=True` the prompt is coloured with ANSI escapes.

- **`pebbleshell.text`**
  - Small string helpers: `is_space`, `remove_char`, `cut_after`, `compare_till`,
    `compare_till_first`, `is_valid_identifier` and `sort_strings`.

## A short tour

```python
from pebbleshell.tokenizer import tokenize
from pebbleshell.environment import Environment, export_line
from pebbleshell.expansion import transform_arg
from pebbleshell.builtins import builtin_kind

for token in tokenize("echo hello | grep h && ls > out.txt"):
    print(token.type, token.value)

env = Environment.from_environ(["HOME=/home/user", "SHLVL=1"], "/tmp")
print(env.value("SHLVL"))          # 2
env.set("GREETING=hi")
print(export_line("GREETING=hi"))  # declare -x GREETING="hi"
print(transform_arg("$GREETING", env).text)  # hi

print(builtin_kind(["echo", "hi"]))  # Builtin.ECHO
```

## Behaviour worth knowing

- `export` with no arguments lists the `declare -x` lines in sorted order.
- `export NAME` without `=` only declares the name. It does not set a variable.
- An invalid identifier stops `export` with exit code 1.
- `SHLVL` is reset to 1 when the inherited value is not positive or is above
  1000. Otherwise it goes up by one.
- Wildcards never match names that start with a dot. The matches are sorted and
  joined with single spaces.
- `exit` takes its status modulo 256. An argument that is empty, not numeric or
  zero makes it exit with 255.
- `echo` drops a word that still starts with `$`, unless that word came from
  single quotes.

## What it does not do

The package has no interactive loop and no command to start. It does not read
input lines, handle signals or keep a history. There is also no parser that builds
a command tree from tokens. For that reason pipelines, `&&`/`||` lists and
parenthesised groups are recognised by `tokenize` but are never executed. Putting
the stages together into a working shell is left to the caller.

## Running the tests

Install the `test` extra and run `pytest`.