"""Persistent key/value property files kept in the user cache."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path


def _escape(text: str) -> str:
    return text.encode("unicode_escape").decode("ascii")


def _unescape(text: str) -> str:
    return text.encode("ascii").decode("unicode_escape")


@dataclass
class PropStore:
    """Properties stored as ``key=value`` lines, re-read on every lookup."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def _load(self) -> dict[str, str]:
        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return {}
        pairs = (line.partition("=") for line in lines)
        return {_unescape(k): _unescape(v) for k, sep, v in pairs if sep}

    def get(self, key: str) -> str:
        """Return the value stored under ``key``, or an empty string."""
        return self._load().get(key, "")

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` and write the file."""
        if "=" in key:
            raise ValueError(f"property key may not contain '=': {key!r}")
        props = self._load()
        props[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            "".join(f"{_escape(k)}={_escape(v)}\n" for k, v in props.items()),
            encoding="utf-8",
        )


def _user_cache_dir() -> Path:
    if sys.platform == "win32":
        local = os.environ.get("LocalAppData")
        if not local:
            raise OSError("%LocalAppData% is not defined")
        return Path(local)
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    return Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")


def user_cache(app: str, name: str) -> PropStore:
    """Return the property store ``name`` for ``app`` in the user cache dir."""
    return PropStore(_user_cache_dir() / app / name)