"""Geometry and key handling of the main window: task list height and column titles."""

from __future__ import annotations

from typing import Callable, Sequence, Union

INFO_PANEL_WIDTH = 20
MIN_TASK_HEIGHT = 5
# Rows kept free below the task list for the message area.
MESSAGE_RESERVE = 10
# Percentages are stored multiplied by 100: 10000 means 100 %.
FULL_PERCENT = 10000
DEFAULT_TASK_HEIGHT_PERCENT = 5000
PERCENT_STEP_LOSS = 10

COLUMN_NAMES = (
    "  #  ",
    "state ",
    "   done%",
    "  project             ",
    "  est",
    "  d/l",
    "  application                   ",
    "  task",
)

_ESCAPE = 27
_SS3 = 79
_KEYPAD_PLUS = 107
_KEYPAD_MINUS = 109

Key = Union[int, str]


def _keycode(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            return -1
        return ord(key)
    return key


def task_height(height: int, percent: int) -> int:
    """Rows given to the task list in a window ``height`` rows tall.

    The result is at least 5 rows, and never leaves fewer than 10 rows
    for the rest of the window.
    """
    rows = int(height * percent / 10000.0)
    if rows < MIN_TASK_HEIGHT:
        rows = MIN_TASK_HEIGHT
    if rows > height - MESSAGE_RESERVE:
        rows = height - MESSAGE_RESERVE
    return rows


def adjust_task_height_percent(height: int, percent: int, key: Key) -> int:
    """New task list percentage after '+' (shrink) or '-' (grow).

    Keys other than '+' and '-' leave the percentage unchanged, as does a
    key pressed when the list is already at its limit.
    """
    code = _keycode(key)
    if code not in (ord("+"), ord("-")):
        return percent
    rows = int(height * percent / 10000.0)
    if code == ord("+") and rows < MIN_TASK_HEIGHT:
        return percent
    if code == ord("-") and rows > height - MESSAGE_RESERVE:
        return percent
    delta = int(10000.0 / height)
    if code == ord("+"):
        delta = -delta
    percent += delta
    if percent > FULL_PERCENT:
        percent = FULL_PERCENT
    percent -= PERCENT_STEP_LOSS
    if percent < 0:
        percent = 0
    return percent


def column_title(
    names: Sequence[str],
    visible: Union[Callable[[int], bool], Sequence[bool]],
) -> str:
    """Header of the task table made of the names of visible columns.

    ``visible`` is either a predicate on the column index or a sequence of
    flags; a column without a flag is hidden.
    """
    if callable(visible):
        shown = visible
    else:
        flags = list(visible)

        def shown(index: int) -> bool:
            return index < len(flags) and bool(flags[index])

    return "".join(name for index, name in enumerate(names) if shown(index))


class KeypadTranslator:
    """Turns the raw escape sequences of keypad '+' and '-' into those keys.

    Some terminals send ESC O k and ESC O m for the keypad plus and minus
    when num lock is off; fed one key code at a time, the last code of
    such a sequence comes back as '+' or '-'.
    """

    def __init__(self) -> None:
        self._previous = 0
        self._before_previous = 0

    def feed(self, keycode: int) -> int:
        """Return ``keycode``, translated when it ends a keypad sequence."""
        if self._before_previous == _ESCAPE and self._previous == _SS3:
            if keycode == _KEYPAD_PLUS:
                keycode = ord("+")
            elif keycode == _KEYPAD_MINUS:
                keycode = ord("-")
        self._before_previous = self._previous
        self._previous = keycode
        return keycode