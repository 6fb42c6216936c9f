from pebbleshell.prompt import get_prompt, trim_dir_path


def test_trim_dir_path_keeps_last_component():
    assert trim_dir_path("/home/user/project") == "/project"


def test_trim_dir_path_root():
    assert trim_dir_path("/") == "/"


def test_trim_dir_path_without_slash():
    assert trim_dir_path("relative") == "relative"


def test_plain_prompt():
    assert get_prompt("/tmp/work", False) == "minishell " + "/work" + " > "


def test_fancy_prompt_layout():
    prompt = get_prompt("/tmp/work", True)
    assert prompt.startswith("\033[1;97mminishell\033[0;39m \033[2;96m/work")
    assert prompt.endswith("\033[0;39m\033[1;97m > \033[0;39m")


def test_prompt_defaults_to_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    prompt = get_prompt()
    assert prompt == "minishell /" + tmp_path.name + " > "