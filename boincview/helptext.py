"""Contents and key handling of the hot-key help window."""

from __future__ import annotations

from typing import Union

from boincview.colorstring import ColorString

ATTR_HEADING = 1
ATTR_TEXT = 2

CAPTION = " Hot keys list "
HEIGHT = 17
WIDTH = 60

KEY_ESCAPE = 27
KEY_ENTER = 0o527

_LINES = (
    (ATTR_HEADING, "\n   Common Controls:\n"),
    (ATTR_TEXT, '       "N"           - Toogle between BOINC hosts\n'),
    (ATTR_TEXT, '       "C"           - Edit configuration\n'),
    (ATTR_TEXT, '       "Q"           - Quit boinctui\n'),
    (ATTR_TEXT, '       "F9"          - Toogle main menu\n'),
    (ATTR_TEXT, '       "PgUp"/"PgDn" - Scroll Messages Window\n'),
    (ATTR_TEXT, "\n"),
    (ATTR_HEADING, "   Task Controls:\n"),
    (ATTR_TEXT, '       "Up"/"Dn"     - Select task\n'),
    (ATTR_TEXT, '       "S"           - Suspend selected running task\n'),
    (ATTR_TEXT, '       "R"           - Resume selected suspended task\n'),
    (ATTR_TEXT, '       "A"           - Abort selected task\n'),
    (ATTR_TEXT, '       "Enter"       - View selected task raw info\n'),
)

_CLOSE_KEYS = frozenset({KEY_ESCAPE, KEY_ENTER, ord(" "), ord("\n")})


def help_text() -> ColorString:
    """The help window text, headings and entries in their own attributes."""
    text = ColorString()
    for attr, line in _LINES:
        text.append(attr, "%s", line)
    return text


def is_close_key(keycode: Union[int, str]) -> bool:
    """True for the keys that close the help window: Esc, Enter, space, newline."""
    if isinstance(keycode, str):
        if len(keycode) != 1:
            return False
        keycode = ord(keycode)
    return keycode in _CLOSE_KEYS