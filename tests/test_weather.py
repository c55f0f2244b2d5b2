import urllib.request

from xcmd.weather import basic_weather


class _FakeResponse:
    def __init__(self, body):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_basic_weather(monkeypatch):
    seen = []

    def fake_urlopen(url, timeout=None):
        seen.append(url)
        return _FakeResponse("Somewhere: +12°C\n".encode("utf-8"))

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
    assert basic_weather() == "Somewhere: +12°C"
    assert seen == ["https://wttr.in?format=3"]