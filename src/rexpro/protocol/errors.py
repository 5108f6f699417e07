"""Exceptions raised by the protocol layer.

Transport failures are defined separately in :mod:`rexpro.transport.base`;
nothing here depends on a transport.
"""

from __future__ import annotations

from typing import Iterable


__all__ = [
    "ProtocolError",
    "InvalidMeta",
    "UnknownMessageType",
    "UnregisteredVariant",
    "MalformedBody",
    "UnsupportedSerializer",
    "NoBody",
    "NoSerializedBody",
    "TruncatedHeader",
    "InvalidLength",
]


class ProtocolError(Exception):
    """Base class for all protocol-layer errors."""


class InvalidMeta(ProtocolError, ValueError):
    """One or more meta keys are not accepted by a message body.

    :ivar keys: every rejected key, in the order supplied.
    """

    def __init__(self, variant: str, keys: Iterable[str]):
        self.variant = variant
        self.keys = tuple(keys)
        listed = ', '.join(repr(key) for key in self.keys)
        super().__init__(f"{variant} doesn't accept the meta data {listed}")


class UnknownMessageType(ProtocolError, ValueError):
    """No body variant is registered for a message type id."""

    def __init__(self, message_type):
        self.message_type = message_type
        super().__init__(f"{message_type!r} is not a valid message type")


class UnregisteredVariant(ProtocolError, TypeError):
    """A body variant has no message type id."""

    def __init__(self, variant):
        self.variant = variant
        name = getattr(variant, '__name__', type(variant).__name__)
        super().__init__(f"message type not found for body variant {name}")


class MalformedBody(ProtocolError, ValueError):
    """A decoded body does not have the shape its variant requires."""


class UnsupportedSerializer(ProtocolError, ValueError):
    """A serializer type id is not one this implementation understands."""

    def __init__(self, serializer):
        self.serializer = serializer
        super().__init__(f"{serializer!r} is not a valid serializer type")


class NoBody(ProtocolError, RuntimeError):
    """A message was packed before a body was assigned."""


class NoSerializedBody(ProtocolError, RuntimeError):
    """A message was unpacked before its serialized body was assigned."""


class TruncatedHeader(ProtocolError, ValueError):
    """Fewer header bytes were supplied than the fixed header size."""


class InvalidLength(ProtocolError, ValueError):
    """A body length cannot be represented as an unsigned 32-bit value."""
