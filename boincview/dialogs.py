"""Message box layout and its buttons."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from boincview.textutil import char_length

MESSAGEBOX_WIDTH = 40
# Columns taken by the frame and margins around the text.
_TEXT_MARGIN = 4
_BUTTON_GAP = 2

Key = Union[int, str]


def _keycode(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key is one character, got {key!r}")
        return ord(key)
    return int(key)


class Button:
    """A button that hands out its event once, when one of its keys is pressed."""

    def __init__(self, text: str, event: Any, keys: Iterable[Key] = ()) -> None:
        self.text = text
        self.event = event
        self.keys = [_keycode(key) for key in keys]

    def width(self) -> int:
        """Screen width: the text with one space on each side."""
        return char_length(self.text) + 2

    def press(self, key: Key) -> Optional[Any]:
        """Return the button's event if ``key`` is one of its keys.

        The event is given out only once; later presses return None.
        """
        try:
            code = _keycode(key)
        except ValueError:
            return None
        if code not in self.keys or self.event is None:
            return None
        event, self.event = self.event, None
        return event


def messagebox_content_height(text: str, width: int = MESSAGEBOX_WIDTH) -> int:
    """Screen rows needed for ``text`` in a message box ``width`` columns wide.

    Lines wrap at ``width - 4`` columns and break at newlines; even empty
    text takes one row.
    """
    limit = width - _TEXT_MARGIN
    col = limit
    rows = 0
    for ch in text or "\0":
        col += 1
        if col >= limit or ch == "\n":
            col = 0 if ch == "\n" else 1
            rows += 1
    return rows


def button_positions(
    widths: Sequence[int], box_width: int, box_height: int
) -> List[Tuple[int, int]]:
    """(row, column) of each button, centred in a row near the box's bottom."""
    total = sum(width + _BUTTON_GAP for width in widths)
    row = box_height - 3
    col = int((box_width - total) / 2) + 2
    positions = []
    for width in widths:
        positions.append((row, col))
        col += width + _BUTTON_GAP
    return positions