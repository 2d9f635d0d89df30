"""Socket-backed line transport."""

from __future__ import annotations

import socket
from typing import Optional

from .base import Transport, TransportConnectionError, TransportTimeout


encoding = 'utf-8'
terminator = b'\r\n'

# RFC 2229 limits lines to 1024 octets; allow generous slack for servers
# that do not honour it, but refuse to buffer without bound.

maximum_line = 65536


class TcpTransport(Transport):
    """Exchange CRLF-terminated lines over a TCP connection.

    Incoming lines may end in CRLF or a bare LF; either is stripped. Bytes
    that are not valid UTF-8 are decoded with replacement characters.
    """

    def __init__(self, host: str, port: int, timeout: Optional[float] = None):
        self.host = host
        self.port = int(port)
        self._timeout = timeout
        self.socket: Optional[socket.socket] = None
        self.reader = None

    def __repr__(self) -> str:
        return f"TcpTransport({self.host!r}, {self.port})"

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self) -> None:
        if self.socket is not None:
            return

        try:
            sock = socket.create_connection((self.host, self.port), timeout=self._timeout)
        except socket.timeout as exc:
            raise TransportTimeout(
                f"connect to {self.host}:{self.port} timed out"
            ) from exc
        except OSError as exc:
            raise TransportConnectionError(
                f"cannot connect to {self.host}:{self.port}: {exc}"
            ) from exc

        self.socket = sock
        self.reader = sock.makefile('rb')

    def close(self) -> None:
        reader = self.reader
        sock = self.socket
        self.reader = None
        self.socket = None

        if reader is not None:
            try:
                reader.close()
            except OSError:
                pass

        if sock is not None:
            try:
                sock.close()
            except OSError:
                pass

    def send_line(self, line: str) -> None:
        if self.socket is None:
            raise TransportConnectionError("transport is not open")

        data = line.encode(encoding) + terminator

        try:
            self.socket.sendall(data)
        except socket.timeout as exc:
            raise TransportTimeout(
                f"send to {self.host}:{self.port} timed out"
            ) from exc
        except OSError as exc:
            raise TransportConnectionError(
                f"send to {self.host}:{self.port} failed: {exc}"
            ) from exc

    def read_line(self) -> str:
        if self.reader is None:
            raise TransportConnectionError("transport is not open")

        try:
            raw = self.reader.readline(maximum_line + 1)
        except socket.timeout as exc:
            raise TransportTimeout(
                f"read from {self.host}:{self.port} timed out"
            ) from exc
        except OSError as exc:
            raise TransportConnectionError(
                f"read from {self.host}:{self.port} failed: {exc}"
            ) from exc

        if raw == b'':
            raise TransportConnectionError(
                f"connection closed by {self.host}:{self.port}"
            )

        if raw.endswith(b'\n'):
            raw = raw[:-1]
            if raw.endswith(b'\r'):
                raw = raw[:-1]
        elif len(raw) > maximum_line:
            raise TransportConnectionError(
                f"line from {self.host}:{self.port} exceeds {maximum_line} bytes"
            )

        return raw.decode(encoding, errors='replace')
