"""Current weather report."""

from __future__ import annotations

from .net import fetch_text

WEATHER_URL = "https://wttr.in?format=3"


def basic_weather() -> str:
    """Return a one-line weather summary for the current location."""
    return fetch_text(WEATHER_URL)