# boincview

This package holds the building blocks of a text-mode monitor for BOINC
clients. It does no terminal drawing itself. It provides the data, state and
geometry behind each part of such a screen.

## Modules

- **`boincview.config`**: `Config` loads the XML settings file from a home
  directory, which is the user's home unless you pass `home=`. The file name
  defaults to `.boinctui.cfg`. With no file, `Config` builds default settings
  holding one server, `127.0.0.1:31416`, and `is_default` is true. If the file
  cannot be parsed, `errmsg` holds the reason, and `save()` will not overwrite
  that file. `get_int()` and `set_int()` read and write integer settings.
  Server entries are `ServerEntry` records: `servers()` lists them,
  `add_host()` adds one and skips it if the host or port is empty, and
  `replace_servers()` replaces all of them.
- **`boincview.connection`**: `Connection` opens a TCP socket to a client's
  GUI RPC port when it is first used. `send_request()` formats a request
  printf-style and sends it. `wait_result()` reads until the reply ends with
  `\x03` and returns the reply without that byte. It works as a context
  manager. Failures raise `RpcConnectionError`, a subclass of `OSError`.
- **`boincview.messages`**: `MessageLog` adds messages newer than the last
  sequence number to a `ScrollView`. It writes a time/project header only when
  either one changes, removes ` ![CDATA[...]] ` wrappers (`strip_cdata`), and
  formats times with `format_timestamp`.
- **`boincview.stats`**: these functions work on plain mappings. `count_tasks`
  returns a `TaskCounts`, `disk_usage` returns a `DiskUsage`, `project_status`
  returns the status marks `[Susp.]` and `[N.N.Tsk.]`, and
  `summarize_statistics` returns a `StatisticsSummary` of `ProjectStat`
  values, newest first. `find_day` and `day_name` help with the dates.
- **`boincview.scrollview`**: `ScrollView` is a scrollable buffer of
  `ColorString` lines. It supports autoscroll, `page_up`/`page_down`,
  `home`/`end`, and `visible_lines()`, which also updates a linked scroll bar.
- **`boincview.scrollbar`**: `ScrollBar.set_pos()` takes the content range and
  the visible window. `render()` returns the column of cells as
  `(character, selected)` pairs, drawn with box characters or, if requested,
  with ASCII.
- **`boincview.colorstring`**: `ColorString` is a line made of
  `ColorStringPart`s, each with its own attribute. Parts are formatted
  printf-style.
- **`boincview.layout`**: `task_height` and `adjust_task_height_percent` size
  the task list against the message area. `column_title` builds the task table
  header from the visible columns. `KeypadTranslator` turns the keypad
  `ESC O k` / `ESC O m` sequences into `+` / `-`.
- **`boincview.dialogs`**: `Button` hands out its event once when one of its
  keys is pressed. `messagebox_content_height` and `button_positions` lay out
  a message box.
- **`boincview.helptext`** and **`boincview.about`**: the hot-key help text
  and the keys that close that window (`help_text`, `is_close_key`), and the
  about-window title line and centring (`about_text`, `center_column`).
- **`boincview.textutil`**: `char_length`, `truncate`, `rtrim` and `ltrim`.
- **`boincview.debuglog`**: `DebugLog` is an optional append-mode log. It
  writes to a file in the temporary directory, or to stdout when no file name
  is given.

## Example

```python
from boincview.config import Config
from boincview.connection import Connection

cfg = Config(".boinctui.cfg")
for server in cfg.servers():
    with Connection(server.host, server.port) as conn:
        conn.send_request("<boinc_gui_rpc_request>\n<get_state/>\n</boinc_gui_rpc_request>\n\x03")
        print(conn.wait_result())
```

## What it does not do

The package has no command to run and no curses screen, event loop or menus.
It does not build status-line hints for the main screen, and it has no task
list window. `Connection` moves raw text only. It does not authenticate with a
client and does not parse RPC replies into the mappings that
`boincview.stats` and `boincview.messages` expect. That step is left to the
caller.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```