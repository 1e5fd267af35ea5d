"""Debug log written to a file in the temporary directory or to stdout."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO


class DebugLog:
    """Append-mode debug log.

    With no file name the log goes to standard output. When ``enabled`` is
    false every operation does nothing.
    """

    def __init__(
        self,
        filename: Optional[str] = None,
        directory: Optional[str | Path] = None,
        enabled: bool = True,
    ) -> None:
        self.filename = filename
        self.directory = Path(directory) if directory is not None else Path(tempfile.gettempdir())
        self.enabled = enabled
        self._stream: Optional[TextIO] = None

    @property
    def path(self) -> Optional[Path]:
        """Full path of the log file, or None when logging to stdout."""
        if self.filename is None:
            return None
        return self.directory / self.filename

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def open(self) -> None:
        """Open the log for appending; a file that cannot be opened is ignored."""
        if not self.enabled or self._stream is not None:
            return
        if self.filename is None:
            self._stream = sys.stdout
            return
        try:
            self._stream = open(self.path, "a", encoding="utf-8")
        except OSError:
            self._stream = None
            return
        self.write("\nINFO: log opened success\n")

    def close(self) -> None:
        """Write a closing line and close the file."""
        if not self.enabled or self._stream is None:
            return
        self.write("\nINFO: log close\n")
        stream, self._stream = self._stream, None
        if stream is not sys.stdout:
            stream.close()

    def write(self, fmt: str, *args) -> None:
        """Write a printf-style formatted message, opening the log if needed."""
        if not self.enabled:
            return
        if self._stream is None:
            self.open()
            if self._stream is None:
                return
        self._stream.write(fmt % args if args else fmt)
        self._stream.flush()

    def __enter__(self) -> "DebugLog":
        self.open()
        return self

    def __exit__(self, *args) -> None:
        self.close()