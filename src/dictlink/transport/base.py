"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`dictlink.protocol` so the protocol remains
independent of sockets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A read or write did not complete within the socket timeout."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class Transport(ABC):
    """Minimal contract for a line-oriented transport.

    Lines are exchanged as ``str`` without their line terminators.
    """

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection. Must be safe to repeat."""

    @abstractmethod
    def send_line(self, line: str) -> None:
        """Send one line; the transport appends the line terminator."""

    @abstractmethod
    def read_line(self) -> str:
        """Receive the next line, with its terminator removed.

        Raises :class:`TransportConnectionError` at end of stream.
        """

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
