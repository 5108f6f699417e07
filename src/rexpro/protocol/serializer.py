"""Body serializers, selected by the serializer type id in the header.

Only JSON (id 1) is implemented. A serializer converts the positional form
of a body to bytes and back; it does not check the shape of what it
decodes, that is left to :meth:`rexpro.protocol.body.Body.hydrate`.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .. import json
from . import fields
from .errors import MalformedBody, UnsupportedSerializer


class JsonSerializer:
    """Encode positional forms as compact UTF-8 JSON arrays."""

    id = fields.SERIALIZER_JSON

    def encode(self, positional: List[Any]) -> bytes:
        return json.dumps(positional)

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except (json.DecodeError, ValueError) as exc:
            raise MalformedBody(f"body is not valid JSON: {exc}") from exc


serializers: Dict[int, Any] = {
    JsonSerializer.id: JsonSerializer(),
}


def serializer_for(serializer: int):
    """Return the serializer registered for the *serializer* type id."""

    if isinstance(serializer, bool):
        raise UnsupportedSerializer(serializer)

    try:
        return serializers[serializer]
    except (KeyError, TypeError):
        raise UnsupportedSerializer(serializer) from None


def is_supported(serializer: int) -> bool:
    try:
        serializer_for(serializer)
    except UnsupportedSerializer:
        return False
    return True


def encode(serializer: int, positional: List[Any]) -> bytes:
    return serializer_for(serializer).encode(positional)


def decode(serializer: int, data: bytes) -> Any:
    return serializer_for(serializer).decode(data)
