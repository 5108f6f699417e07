from . import fields
from . import errors
from . import identifier
from . import body
from . import request
from . import response
from . import registry
from . import serializer
from . import wire
from . import message
from . import factory

from .fields import PROTOCOL_VERSION
from .errors import *
from .request import ScriptRequest, SessionRequest
from .response import ErrorResponse, ScriptResponse, SessionResponse
from .message import Message
from .wire import Header, EncodedFrame, DecodedBody, decode_header, encode_header, pack_frame, unpack_frame


"""
RexPro Protocol Layer
=====================

This package implements the RexPro binary message format: the fixed header,
the message type registry, and the rules that convert typed request and
response bodies to and from the positional JSON arrays carried on the wire.

The protocol layer MUST NOT depend on any transport implementation, and
performs no I/O of its own.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Message Constructors (factory.py)
    Convenience wrappers for common requests
    - script()
    - session()
    - kill_session()

    │
    ▼
Message Facade (message.py)
    Header fields + body, computed on demand
    - pack()   body  -> bytes
    - unpack() bytes -> body

    │
    ▼
Frame Codec (wire.py)
    Fixed 11 byte header, 32-bit body length
    - pack_frame()   -> EncodedFrame
    - unpack_frame() -> DecodedBody

    │
    ▼
Message Type Registry (registry.py)
    Message type id <-> body class

Serializers (serializer.py)
    Serializer type id -> encode/decode of positional forms

    │
    ▼
Body Variants (body.py, request.py, response.py)
    SessionRequest, ScriptRequest,
    SessionResponse, ScriptResponse, ErrorResponse
    Positional layout and meta allow-list per variant

---------------------------------------------------------------------

Wire Format
-----------

    offset  size  field
    0       1     protocol version
    1       1     serializer type id
    2       4     reserved, always zero
    6       1     message type id
    7       4     body length in bytes, big-endian
    11      n     body

Message type ids:

    0  ErrorResponse
    1  SessionRequest
    2  SessionResponse
    3  ScriptRequest
    5  ScriptResponse

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
