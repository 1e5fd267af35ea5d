"""Contents of the about window."""

from __future__ import annotations

CAPTION = " BOINCTUI "
HEIGHT = 10
TITLE_ROW = 3


def about_text(version: str) -> str:
    """The program title line with its version."""
    return "%s ver %s" % ("BOINC Client manager", version)


def center_column(width: int, text: str) -> int:
    """Column at which ``text`` starts when centred in a window ``width`` wide."""
    return width // 2 - len(text) // 2