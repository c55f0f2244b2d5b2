"""System clipboard access through the platform's clipboard utilities."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys


class ClipboardError(RuntimeError):
    """The clipboard could not be read or written."""


_COPY = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "other": [
        ["xclip", "-in", "-selection", "clipboard"],
        ["xsel", "--input", "--clipboard"],
        ["termux-clipboard-set"],
    ],
}
_PASTE = {
    "darwin": [["pbpaste"]],
    "win32": [["powershell", "-NoProfile", "-Command", "Get-Clipboard -Raw"]],
    "other": [
        ["xclip", "-out", "-selection", "clipboard"],
        ["xsel", "--output", "--clipboard"],
        ["termux-clipboard-get"],
    ],
}


def _run(copy: bool, **kwargs) -> subprocess.CompletedProcess:
    table = _COPY if copy else _PASTE
    tools = table.get(sys.platform)
    if tools is None:
        tools = list(table["other"])
        if os.environ.get("WAYLAND_DISPLAY"):
            tools.insert(0, ["wl-copy"] if copy else ["wl-paste", "--no-newline"])
    argv = next((tool for tool in tools if shutil.which(tool[0])), None)
    if argv is None:
        raise ClipboardError("no clipboard utility found")
    try:
        return subprocess.run(argv, check=True, **kwargs)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ClipboardError(f"{argv[0]} failed: {exc}") from exc


def copy_text(text: str) -> None:
    """Put ``text`` on the clipboard."""
    _run(True, input=text.encode("utf-8"))


def paste_text() -> str:
    """Return the clipboard contents."""
    return _run(False, capture_output=True).stdout.decode("utf-8", errors="replace")