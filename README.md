# xcmd

A collection of small everyday helpers, usable from Python.

## Install

```
pip install .
```

## Modules

### `xcmd.date`

Date strings in fixed formats. Each function takes an optional `datetime`
and uses the current local time when none is given.

- `date_min(now)` – `YYYY/MM/DD`, e.g. `2024/03/05`
- `date_full(now)` – `YYYY Mon DD`, e.g. `2024 Mar 05`
- `date_time(now)` – date and 12-hour time, e.g. `2024/03/05 02:30PM`
- `date_head(now)` – heading form, e.g. `2024 March 05, Tuesday`

### `xcmd.env`

- `get_env(name, environ)` – the value of `name`; if it is unset or empty,
  the value of `name.upper()`; otherwise an empty string.
- `env_data(environ)` – every variable as a `NAME=value` string.

`environ` defaults to `os.environ`.

### `xcmd.git`

- `wrap_terraform(text)` – wraps a terraform plan in a collapsible
  `<details>` block with an `hcl` code fence.
- `wrap_code(text, lang)` – wraps text in a fenced code block; the language
  defaults to `bash`.

### `xcmd.clip`

- `copy_text(text)` – puts text on the system clipboard.
- `paste_text()` – returns the clipboard contents.

These call a clipboard tool found on `PATH`: `pbcopy`/`pbpaste` on macOS,
`clip`/PowerShell on Windows, and elsewhere `wl-copy`/`wl-paste` (when
`WAYLAND_DISPLAY` is set), `xclip`, `xsel` or the Termux clipboard tools.
Failures raise `ClipboardError`.

### `xcmd.net` and `xcmd.weather`

- `fetch_text(url)` – GETs a URL and returns the stripped body, whatever the
  HTTP status; connection failures raise.
- `public_ip()` – this machine's public IP address, from `ipconfig.io`.
- `basic_weather()` – a one-line weather summary from `wttr.in`.

### `xcmd.props`

`PropStore` keeps properties as `key=value` lines in a file and re-reads the
file on every `get`. `get(key)` returns an empty string for a missing key;
`set(key, value)` writes the file, creating its directory, and rejects keys
containing `=`. `user_cache(app, name)` returns the store at
`<cache dir>/<app>/<name>`, where the cache directory is `$XDG_CACHE_HOME`
(or `~/.cache`), `~/Library/Caches` on macOS, or `%LocalAppData%` on Windows.

### `xcmd.kubeseal`

`seal(props, cert, stdin)` runs `kubeseal --format=yaml --cert=<path>` on
the secret bytes given as `stdin` and returns its YAML output. A `cert` that
is given is stored in `props` under `kubeseal-cert`; when none is given, the
stored path is used. With no path at all it raises `MissingCertError`.

```python
from xcmd.kubeseal import seal
from xcmd.props import user_cache

props = user_cache("x", "kubeseal.props")
print(seal(props, "cert.pem", open("secret.yaml", "rb").read()))
```

### `xcmd.notes`

`pick_note(directory)` runs `fzf` in the notes directory, with a `bat`
preview, and returns `<directory>/<chosen file>`. The directory defaults to
`$PSUITE_NOTES_DIR`. A cancelled pick raises `subprocess.CalledProcessError`.

## Example

```python
from datetime import datetime
from xcmd.date import date_head
from xcmd.git import wrap_code

print(date_head(datetime(2024, 3, 5)))
print(wrap_code("ls -l", "bash"))
```

## What it does not do

The package has no command-line program: there is no command to install or
run, and each helper is called from Python. It also has no pomodoro timer;
`PropStore` can hold state, but nothing here tracks or reports a countdown.