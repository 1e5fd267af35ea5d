"""TCP connection to a client's GUI RPC port."""

from __future__ import annotations

import socket
from typing import Optional, Union

# A request is cut to this many characters.
MAX_REQUEST_LENGTH = 1023
# Replies end with this byte.
END_OF_REPLY = b"\x03"
_CHUNK = 1024


class RpcConnectionError(OSError):
    """Raised when the connection cannot be made or is lost."""


class Connection:
    """A lazily opened socket that sends requests and reads \\x03-terminated replies."""

    def __init__(self, host: str, port: Union[str, int]) -> None:
        self.host = host
        self.port = str(port)
        self._sock: Optional[socket.socket] = None

    @property
    def is_connected(self) -> bool:
        return self._sock is not None

    def connect(self) -> None:
        """Open the socket if it is not open yet."""
        if self._sock is not None:
            return
        try:
            port = int(self.port)
        except ValueError as exc:
            raise RpcConnectionError(f"bad port {self.port!r}") from exc
        try:
            self._sock = socket.create_connection((self.host, port))
        except OSError as exc:
            self._sock = None
            raise RpcConnectionError(f"connect {self.host}:{self.port} failed") from exc

    def disconnect(self) -> None:
        """Close the socket; safe to call when not connected."""
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()

    def send_request(self, fmt: str, *args) -> None:
        """Format a request printf-style and send it, connecting first if needed."""
        request = fmt % args if args else fmt
        request = request[:MAX_REQUEST_LENGTH]
        self.connect()
        try:
            self._sock.sendall(request.encode("utf-8"))
        except OSError as exc:
            self.disconnect()
            raise RpcConnectionError(f"send request {self.host}:{self.port} error") from exc

    def wait_result(self) -> str:
        """Read until the reply ends with \\x03 and return it without that byte."""
        self.connect()
        buffer = bytearray()
        while True:
            try:
                chunk = self._sock.recv(_CHUNK)
            except OSError as exc:
                self.disconnect()
                raise RpcConnectionError(f"recv fail {self.host}:{self.port}") from exc
            if not chunk:
                self.disconnect()
                raise RpcConnectionError(f"recv fail {self.host}:{self.port}")
            buffer += chunk
            if buffer.endswith(END_OF_REPLY):
                del buffer[-1]
                return buffer.decode("utf-8", errors="replace")

    def __enter__(self) -> "Connection":
        self.connect()
        return self

    def __exit__(self, *args) -> None:
        self.disconnect()