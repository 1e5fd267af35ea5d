"""Vertical scroll bar model rendered to a column of cells."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

ASCII_END = "+"
ASCII_BODY = "X"
ASCII_INACTIVE = "|"
BOX_BODY = "▒"
BOX_VLINE = "│"

Cell = Tuple[str, bool]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class ScrollBar:
    """A one-column scroll bar showing which part of the content is visible.

    ``top`` and ``bottom`` are the end characters (None for none);
    ``inactive`` fills the bar when all content is visible.
    """

    def __init__(
        self,
        height: int,
        top: Optional[str] = None,
        bottom: Optional[str] = None,
        inactive: str = BOX_VLINE,
    ) -> None:
        self.height = height
        self.top = top
        self.bottom = bottom
        self.inactive = inactive
        self.vmin = 0
        self.vmax = 0
        self.vpos1 = 0
        self.vpos2 = 0
        self.visible = True

    def set_pos(self, vmin: int, vmax: int, vpos1: int, vpos2: int) -> bool:
        """Set the content range and the visible window; return True if changed."""
        self.visible = not (vpos1 <= vmin and vpos2 >= vmax)
        new = (vmin, vmax, vpos1, vpos2)
        if new == (self.vmin, self.vmax, self.vpos1, self.vpos2):
            return False
        self.vmin, self.vmax, self.vpos1, self.vpos2 = new
        return True

    def render(self, ascii: bool = False) -> List[Cell]:
        """Return ``height`` cells from top to bottom as (character, selected)."""
        height = self.height
        if height <= 0:
            return []
        top_symbol = ASCII_END if ascii else self.top
        bottom_symbol = ASCII_END if ascii else self.bottom
        body = ASCII_BODY if ascii else BOX_BODY
        if not self.visible:
            body = ASCII_INACTIVE if ascii else self.inactive

        cells: List[Cell] = [(" ", False)] * height
        row_min = 0
        row_max = height - 1
        if self.top:
            cells[0] = (top_symbol, False)
            row_min = 1
        if self.bottom:
            cells[height - 1] = (bottom_symbol, False)
            row_max -= 1
        length = row_max - row_min + 1
        self._fill(cells, row_min, length, (body, False))

        vmin, vmax, vpos1, vpos2 = self.vmin, self.vmax, self.vpos1, self.vpos2
        if self.visible and vpos2 > vpos1 and vmax > vmin:
            scale = (length - 1) / (vmax - vmin)
            len2 = _round_half_away(scale * (vpos2 - vpos1))
            row_pos = row_min + _round_half_away(scale * (vpos1 - vmin))
            if len2 < 1:
                len2 = 1
            # keep small fragments at either end visibly away from the edge
            if row_pos == row_min and vpos1 > vmin and row_pos < row_max:
                row_pos += 1
            if row_pos + len2 - 1 >= row_max and vpos2 < vmax and row_pos > row_min:
                row_pos -= 1
            if vpos2 == vmax:
                len2 = length - row_pos + 1
            if row_pos >= 0:
                self._fill(cells, row_pos, len2, (" ", True))
        return cells

    @staticmethod
    def _fill(cells: List[Cell], start: int, count: int, cell: Cell) -> None:
        for row in range(max(start, 0), min(start + count, len(cells))):
            cells[row] = cell