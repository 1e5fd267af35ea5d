"""Small text helpers: character length, truncation and space trimming."""

from __future__ import annotations

from typing import Optional


def char_length(text: str | bytes) -> int:
    """Return the length of ``text`` in characters, not bytes.

    Byte strings are decoded as UTF-8; an undecodable tail ends the count.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="ignore")
    return len(text)


def truncate(text: str, length: int) -> str:
    """Cut ``text`` down to at most ``length`` characters."""
    if char_length(text) <= length:
        return text
    return text[: max(length, 0)]


def rtrim(text: Optional[str]) -> Optional[str]:
    """Remove trailing spaces (only the space character)."""
    if text is None:
        return None
    return text.rstrip(" ")


def ltrim(text: Optional[str]) -> Optional[str]:
    """Remove leading spaces (only the space character)."""
    if text is None:
        return None
    return text.lstrip(" ")