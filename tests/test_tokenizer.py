import pytest

from pebbleshell.tokenizer import (
    ShellSyntaxError,
    Token,
    TokenType,
    compare_quotes,
    process_value,
    tokenize,
)

ID = TokenType.IDENTIFIER


def _values(tokens):
    return [token.value for token in tokens]


def test_words_split_on_whitespace():
    assert tokenize("  echo\thello  ") == [Token(ID, "echo"), Token(ID, "hello")]


def test_blank_lines_give_no_tokens():
    assert tokenize("") == []
    assert tokenize(" \t \n") == []


@pytest.mark.parametrize(
    "symbol, kind",
    [
        ("|", TokenType.PIPE),
        (">", TokenType.GREAT),
        (">>", TokenType.DGREAT),
        ("<", TokenType.LESS),
        ("<<", TokenType.DLESS),
        ("&&", TokenType.AND),
        ("||", TokenType.OR),
        ("(", TokenType.OPAR),
        (")", TokenType.CPAR),
    ],
)
def test_single_operator(symbol, kind):
    assert tokenize(f"a {symbol} b") == [Token(ID, "a"), Token(kind), Token(ID, "b")]


def test_operators_need_no_spaces():
    assert tokenize("cat<in>out") == [
        Token(ID, "cat"),
        Token(TokenType.LESS),
        Token(ID, "in"),
        Token(TokenType.GREAT),
        Token(ID, "out"),
    ]


def test_parentheses_around_command():
    assert tokenize("(echo a)") == [
        Token(TokenType.OPAR),
        Token(ID, "echo"),
        Token(ID, "a"),
        Token(TokenType.CPAR),
    ]


@pytest.mark.parametrize("words", [["ls"], ["ls", "-la", "/tmp"], ["x", "y", "z"]])
def test_plain_words_round_trip(words):
    assert _values(tokenize(" ".join(words))) == words


def test_double_quotes_are_removed():
    assert _values(tokenize('echo "hello world"')) == ["echo", "hello world"]


def test_single_quotes_are_kept():
    assert _values(tokenize("echo 'a b'")) == ["echo", "'a b'"]


def test_double_quote_inside_single_is_kept():
    assert _values(tokenize("'a\"b'")) == ["'a\"b'"]


def test_single_quote_inside_double():
    assert _values(tokenize('"it\'s"')) == ["it's"]


def test_quoted_assignment():
    assert _values(tokenize('x="b c"')) == ["x=b c"]


def test_dollar_before_double_quote_gets_marker():
    assert _values(tokenize('$A"b"')) == ["$A''b"]


@pytest.mark.parametrize("line", ['"abc', "'abc", 'echo "x'])
def test_unmatched_quote_raises(line):
    with pytest.raises(ShellSyntaxError, match="matching quote"):
        tokenize(line)


@pytest.mark.parametrize("line", ["a >>> b", "a <> b", "a >< b", "a > > b"])
def test_redirection_runs_raise(line):
    with pytest.raises(ShellSyntaxError, match="unexpected token"):
        tokenize(line)


def test_lone_ampersand_raises():
    with pytest.raises(ShellSyntaxError, match="unexpected token &"):
        tokenize("a & b")


def test_process_value_returns_end():
    assert process_value("abc def", 0) == ("abc", len("abc"))
    assert process_value("x 'a b' y", 2) == ("'a b'", len("x 'a b'"))


def test_process_value_stops_at_closing_paren():
    text = "ab)c"
    assert process_value(text, 0) == ("ab", text.index(")"))


def test_compare_quotes_even_counts():
    assert compare_quotes((0, 0), "abc") is False
    assert compare_quotes((2, 2), "'a'\"b\"") is False


def test_compare_quotes_nested_quote():
    assert compare_quotes((1, 2), '"it\'s"') is False


def test_compare_quotes_unmatched():
    assert compare_quotes((0, 1), '"abc') is True