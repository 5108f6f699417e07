from __future__ import annotations

import struct
from typing import NamedTuple, Tuple

from . import fields
from . import registry
from . import serializer as serializers
from .body import Body
from .errors import InvalidLength, MalformedBody, TruncatedHeader


# Header layout, all fields unsigned and big-endian:
#
#   version (1), serializer (1), reserved (4), message type (1), length (4)

_HEADER = struct.Struct(">BB4sBI")
_LENGTH = struct.Struct(">I")

_RESERVED = bytes(fields.RESERVED)


class Header(NamedTuple):
    version: int
    serializer: int
    message_type: int
    length: int


class EncodedFrame(NamedTuple):
    """A packed body, ready to be written to a transport."""

    header: bytes
    payload: bytes
    message_type: int
    length: int

    @property
    def frame(self) -> bytes:
        return self.header + self.payload


class DecodedBody(NamedTuple):
    """A body hydrated from a received frame."""

    header: Header
    body: Body


def encode_length(length: int) -> bytes:
    """
    Encode a body length as exactly four bytes, most significant first.
    """

    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(f"body length must be an integer, not {type(length).__name__}")

    if length < 0 or length > fields.LENGTH_MAX:
        raise InvalidLength(f"body length {length} is outside 0..{fields.LENGTH_MAX}")

    return _LENGTH.pack(length)


def decode_length(data: bytes) -> int:
    if len(data) < _LENGTH.size:
        raise TruncatedHeader(f"body length requires {_LENGTH.size} bytes, received {len(data)}")

    return _LENGTH.unpack_from(data)[0]


def encode_header(version: int, serializer: int, message_type: int, length: int) -> bytes:
    """
    Pack the fixed 11 byte header. The reserved bytes are always zero.
    """

    length_bytes = encode_length(length)

    try:
        prefix = struct.pack(">BB4sB", version, serializer, _RESERVED, message_type)
    except struct.error as exc:
        raise ValueError(f"header fields must be single unsigned bytes: {exc}") from exc

    return prefix + length_bytes


def decode_header(data: bytes) -> Header:
    """
    Extract the header fields from the first 11 bytes of *data*. The
    reserved bytes are not inspected, and nothing else is validated.
    """

    if len(data) < fields.HEADER_SIZE:
        raise TruncatedHeader(f"header requires {fields.HEADER_SIZE} bytes, received {len(data)}")

    version, serializer, _reserved, message_type, length = _HEADER.unpack_from(data)
    return Header(version, serializer, message_type, length)


def split_frame(data: bytes) -> Tuple[Header, bytes]:
    """
    Split one complete frame into its decoded header and body bytes.
    """

    header = decode_header(data)
    payload = bytes(data[fields.HEADER_SIZE:fields.HEADER_SIZE + header.length])

    if len(payload) < header.length:
        raise MalformedBody(f"header declares {header.length} body bytes, frame has {len(payload)}")

    return header, payload


def pack_frame(body: Body, version: int = fields.PROTOCOL_VERSION, serializer: int = fields.SERIALIZER_JSON) -> EncodedFrame:
    """
    Serialize body -> EncodedFrame

    Layout:
        [11 byte header][serialized body]

    The length in the header is the number of bytes in the serialized
    body, which is not the number of characters for non-ASCII text.
    """

    message_type = registry.id_for_variant(body)
    payload = serializers.encode(serializer, body.to_positional())
    length = len(payload)
    header = encode_header(version, serializer, message_type, length)

    return EncodedFrame(header, payload, message_type, length)


def unpack_frame(header: Header, payload: bytes) -> DecodedBody:
    """
    Deserialize header + body bytes -> DecodedBody
    """

    variant = registry.variant_for_id(header.message_type)
    raw = serializers.decode(header.serializer, payload)
    body = variant()
    body.hydrate(raw)

    return DecodedBody(header, body)
