"""Scrollable list of attributed text lines."""

from __future__ import annotations

from typing import List, Optional

from boincview.colorstring import ColorString
from boincview.scrollbar import ScrollBar


class ScrollView:
    """A window of ``height`` lines onto a growing list of colour strings.

    With autoscroll on, the view keeps the last lines in sight. A linked
    scroll bar is updated every time the visible lines are taken.
    """

    def __init__(self, height: int, scrollbar: Optional[ScrollBar] = None) -> None:
        self.height = height
        self.scrollbar = scrollbar
        self.content: List[ColorString] = []
        self.start_index = 0
        self.autoscroll = False
        self.needs_refresh = True

    def __len__(self) -> int:
        return len(self.content)

    def add_string(self, line: ColorString) -> None:
        """Append a ready-made line."""
        self.content.append(line)
        self.needs_refresh = True

    def add_text(self, attr: int, fmt: str, *args) -> ColorString:
        """Format a new line with a single attribute, append it and return it."""
        line = ColorString(attr, fmt, *args)
        self.add_string(line)
        return line

    def clear(self) -> None:
        """Drop all lines and go back to the top."""
        self.content.clear()
        self.start_index = 0
        self.needs_refresh = True

    def scroll_to(self, delta: int) -> bool:
        """Move the view ``delta`` lines down (negative: up); return True if it moved."""
        if len(self.content) <= self.height:
            return False
        old = self.start_index
        index = max(self.start_index + delta, 0)
        index = min(index, len(self.content) - self.height)
        self.start_index = index
        if old != index:
            self.needs_refresh = True
            return True
        return False

    def set_autoscroll(self, enabled: bool) -> None:
        """Turn autoscroll on or off; turning it on jumps to the end."""
        old = self.start_index
        self.autoscroll = enabled
        if enabled:
            self.start_index = max(len(self.content) - self.height, 0)
        if old != self.start_index:
            self.needs_refresh = True

    def set_start_index(self, n: int) -> None:
        """Show from line ``n``, but never leave empty space after the last line."""
        if len(self.content) - n < self.height:
            self.start_index = max(len(self.content) - self.height, 0)
        else:
            self.start_index = n

    def max_content_width(self) -> int:
        """Length in screen characters of the longest line."""
        return max((line.length() for line in self.content), default=0)

    def visible_lines(self) -> List[ColorString]:
        """Lines currently in view; also updates the linked scroll bar."""
        lines = self.content[self.start_index:self.start_index + self.height]
        if self.scrollbar is not None:
            self.scrollbar.set_pos(
                0, len(self.content), self.start_index, self.start_index + self.height
            )
        return lines

    def resize(self, height: int) -> None:
        """Change the number of visible lines."""
        self.height = height
        self.needs_refresh = True
        if self.autoscroll:
            self.set_autoscroll(True)

    def page_up(self) -> None:
        """Scroll up half a window and stop following the end."""
        self.scroll_to(-(self.height // 2))
        self.set_autoscroll(False)

    def page_down(self) -> bool:
        """Scroll down half a window; at the end, resume autoscroll.

        Returns False when autoscroll was already on and nothing was done.
        """
        if self.autoscroll:
            return False
        old = self.start_index
        self.scroll_to(self.height // 2)
        if old == self.start_index:
            self.set_autoscroll(True)
        return True

    def home(self) -> None:
        """Jump to the first line."""
        self.scroll_to(-len(self.content))
        self.set_autoscroll(False)

    def end(self) -> None:
        """Jump to the last page without turning autoscroll on."""
        self.scroll_to(len(self.content))
        self.set_autoscroll(False)