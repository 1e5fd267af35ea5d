"""Strings built of parts that each carry a display attribute."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from boincview.textutil import char_length

# A formatted part holds at most this many characters.
MAX_PART_LENGTH = 1023


@dataclass
class ColorStringPart:
    """One run of text drawn with a single attribute."""

    attr: int
    text: str

    def length(self) -> int:
        """Length in screen characters."""
        return char_length(self.text)


@dataclass(eq=False)
class ColorString:
    """A sequence of attributed text parts."""

    parts: List[ColorStringPart] = field(default_factory=list)

    def __init__(self, attr: int = 0, fmt: Optional[str] = None, *args) -> None:
        self.parts = []
        if fmt is not None:
            self.append(attr, fmt, *args)

    def append(self, attr: int, fmt: str, *args) -> None:
        """Format ``fmt`` printf-style with ``args`` and add it as a new part."""
        text = fmt % args
        self.parts.append(ColorStringPart(attr, text[:MAX_PART_LENGTH]))

    def clear(self) -> None:
        """Remove every part."""
        self.parts.clear()

    def length(self) -> int:
        """Total length in screen characters."""
        return sum(part.length() for part in self.parts)

    def text(self) -> str:
        """The plain text of all parts joined together."""
        return "".join(part.text for part in self.parts)

    def copy(self) -> "ColorString":
        """An independent copy with equal parts."""
        duplicate = ColorString()
        duplicate.parts = [ColorStringPart(p.attr, p.text) for p in self.parts]
        return duplicate

    def __iter__(self) -> Iterator[ColorStringPart]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorString):
            return NotImplemented
        return self.parts == other.parts

    __hash__ = None  # type: ignore[assignment]