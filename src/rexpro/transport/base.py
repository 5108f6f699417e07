"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`rexpro.protocol` so the protocol remains
transport-agnostic: the protocol produces and consumes bytes, a transport
moves them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The transport could not establish a connection."""


class TransportWriteError(TransportError):
    """Outbound bytes could not be written."""


class TransportReadError(TransportError):
    """Fewer bytes arrived than were requested before the peer went away."""


class TransportTimeout(TransportReadError):
    """A read did not complete in time."""


class Transport(ABC):
    """Minimal contract for a byte-stream transport."""

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Write all of *data*."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Return exactly *size* bytes, or raise."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False

    def __enter__(self) -> "Transport":
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
