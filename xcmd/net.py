"""Network utilities."""

from __future__ import annotations

import urllib.error
import urllib.request

IP_URL = "https://ipconfig.io"
TIMEOUT = 30


def fetch_text(url: str) -> str:
    """GET ``url`` and return its body as stripped text.

    The body is returned whatever the HTTP status; connection failures raise.
    """
    try:
        with urllib.request.urlopen(url, timeout=TIMEOUT) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read()
    return body.decode("utf-8", errors="replace").strip()


def public_ip() -> str:
    """Return this machine's public IP address as reported by a lookup service."""
    return fetch_text(IP_URL)