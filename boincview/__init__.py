"""Building blocks for a text-mode BOINC client monitor: config, connection, messages, statistics and layout."""

__version__ = "0.1.0"

__all__ = [
    "about",
    "colorstring",
    "config",
    "connection",
    "debuglog",
    "dialogs",
    "helptext",
    "layout",
    "messages",
    "scrollbar",
    "scrollview",
    "stats",
    "textutil",
]