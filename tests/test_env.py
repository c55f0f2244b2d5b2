from xcmd.env import env_data, get_env


def test_exact_name():
    assert get_env("editor", {"editor": "vi", "EDITOR": "nano"}) == "vi"


def test_falls_back_to_upper():
    assert get_env("home", {"HOME": "/home/me"}) == "/home/me"


def test_empty_value_falls_back():
    assert get_env("path", {"path": "", "PATH": "/bin"}) == "/bin"


def test_missing_gives_empty():
    assert get_env("nothing", {}) == ""


def test_uses_process_environment(monkeypatch):
    monkeypatch.setenv("XCMD_TEST_VAR", "value")
    assert get_env("xcmd_test_var") == "value"


def test_env_data_pairs():
    assert env_data({"A": "1", "B": "x=y"}) == ["A=1", "B=x=y"]


def test_env_data_process(monkeypatch):
    monkeypatch.setenv("XCMD_DATA_VAR", "abc")
    assert "XCMD_DATA_VAR=abc" in env_data()