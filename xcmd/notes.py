"""Picking a note file interactively."""

from __future__ import annotations

import os
import subprocess

NOTES_ENV = "PSUITE_NOTES_DIR"


def pick_note(directory: str | None = None) -> str:
    """Let the user pick a note with ``fzf`` and return its path.

    The notes directory defaults to the ``PSUITE_NOTES_DIR`` variable.
    """
    if directory is None:
        directory = os.environ.get(NOTES_ENV, "")
    preview = f"bat --style numbers,changes --color always {directory}/{{}}"
    result = subprocess.run(
        ["fzf", "--preview", preview],
        cwd=directory or None,
        stdout=subprocess.PIPE,
        check=True,
    )
    name = result.stdout.decode("utf-8", errors="replace").strip()
    return f"{directory}/{name}"