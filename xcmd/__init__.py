"""Small everyday helpers: dates, environment, git filters, clipboard, network, weather, kubeseal and notes."""

__version__ = "0.1.0"