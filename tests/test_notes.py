import subprocess

import pytest

from xcmd import notes
from xcmd.notes import NOTES_ENV, pick_note


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def run(argv, **kwargs):
        recorded.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, 0, stdout=b"todo.md\n")

    monkeypatch.setattr(notes.subprocess, "run", run)
    return recorded


def test_pick_note_joins_path(tmp_path, calls):
    assert pick_note(str(tmp_path)) == f"{tmp_path}/todo.md"
    argv, kwargs = calls[0]
    assert argv[:2] == ["fzf", "--preview"]
    assert argv[2].endswith(f"{tmp_path}/{{}}")
    assert kwargs["cwd"] == str(tmp_path)


def test_directory_from_environment(tmp_path, calls, monkeypatch):
    monkeypatch.setenv(NOTES_ENV, str(tmp_path))
    assert pick_note() == f"{tmp_path}/todo.md"
    assert calls[0][1]["cwd"] == str(tmp_path)


def test_no_directory_uses_current(calls, monkeypatch):
    monkeypatch.delenv(NOTES_ENV, raising=False)
    assert pick_note() == "/todo.md"
    assert calls[0][1]["cwd"] is None


def test_failure_propagates(tmp_path, monkeypatch):
    def run(argv, **kwargs):
        raise subprocess.CalledProcessError(130, argv)

    monkeypatch.setattr(notes.subprocess, "run", run)
    with pytest.raises(subprocess.CalledProcessError):
        pick_note(str(tmp_path))