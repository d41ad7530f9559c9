# pktray

A small client for the PluralKit API. It includes an interactive text menu. The
menu lists your system's members and marks the ones who are fronting now.
Choosing a member registers a switch to that member.

## Installation

```
pip install .
```

## Running

```
pktray
pktray --data-dir path/to/folder
```

`pktray` reads its settings from `config.json` in a data folder. You can give
the folder with `--data-dir`. Without that option, the folder is `pk_tray`
inside `%APPDATA%` if that variable is set. If it is not set, the folder is
inside `$XDG_CONFIG_HOME`. If neither is set, the folder is `~/.config/pk_tray`.

The first time `pktray` starts, it creates the folder and writes a default
`config.json` there:

```json
{
    "__comment": "Warning: If you change this file, you need to restart the program!",
    "authToken": "",
    "basePath": "/v2",
    "hostname": "api.pluralkit.me"
}
```

Put your PluralKit token in `authToken`, then start `pktray` again. Without a
token you can still read public data, but the member list may be empty, and
choosing a member does not register a switch.

### The menu

The menu prints each entry on its own line. To choose an entry, type its
number and press Enter. If you enter an empty line, the menu is printed again.
If you enter something that is not a number, you get an `Unknown item`
message.

- **View system info** (`1005`): prints your system's name, pronouns and
  description, followed by its members. Each member is shown by display name,
  or by name when there is no display name. If the system cannot be fetched,
  an error is printed instead.
- **Fronter** (`1006` and up): one entry for each member. Members who are
  fronting now are marked `[x]`. Choosing a member registers a switch to that
  member and moves the mark to that member.
- **Open config.json** (`1004`): opens the configuration file with `$EDITOR`
  if it is set, and otherwise with the system's default handler.
- **Exit** (`1002`): quits. End of input also quits.

## Using it as a library

```python
from pktray.config import Config
from pktray.api import PluralKit

api = PluralKit(Config(auth_token="token"))
system = api.get_system("@me")          # None if it cannot be fetched
for member in api.get_members("@me"):   # [] if they cannot be fetched
    print(member.name)
print([m.name for m in api.get_fronters("@me")])
api.set_fronters(["abcde"])             # member ids
```

`PluralKit.set_fronters` does nothing when no token is configured. It raises
`pktray.api.ApiError` when the API refuses the switch. A refusal because the
members are already fronting is not treated as an error.

The package has these modules:

- `pktray.models`: the data classes `System`, `SystemPrivacy`, `Member`,
  `MemberPrivacy`, `ProxyTag` and `Switch`. Each one is built with
  `from_json`, which raises `ModelError` when a required field is missing or a
  field has the wrong type.
- `pktray.config`: `Config`, which has `from_json` and `to_json`. It also has
  `data_path()`, and `load_config(folder)`, which reads `config.json` from the
  folder and writes the defaults there if the file is missing.
- `pktray.http`: `HttpClient`, a small client that sends requests to one
  server and returns `HttpResponse` objects. It raises `HttpError` on failure.
- `pktray.tray`: `TrayApp`, the interactive menu; `format_system_info`; and
  `main`, the entry point of the `pktray` command.

## What it does not do

`pktray` is a menu that runs in a terminal. It does not put an icon in the
system tray, and it has no windows or dialogs. The member list and the marks
for who is fronting are fetched when the app starts. They are not refreshed
after that.

## Tests

```
pip install .[test]
pytest
```