"""Reading environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping


def get_env(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Return variable ``name``, falling back to its upper-case form.

    An unset or empty variable gives an empty string.
    """
    environ = os.environ if environ is None else environ
    value = environ.get(name, "")
    if not value:
        value = environ.get(name.upper(), "")
    return value


def env_data(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return every variable as a ``NAME=value`` string."""
    environ = os.environ if environ is None else environ
    return [f"{key}={value}" for key, value in environ.items()]