"""Transport layer implementations."""

from .. import config

from .base import (
    Transport,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportReadError,
    TransportWriteError,
)

_BACKEND = config.transport

if _BACKEND == "zmq":
    from .zmq.stream import StreamTransport as default
else:
    raise ImportError(f"unknown REXPRO_TRANSPORT backend: {_BACKEND!r}")

from . import session
