"""Transport-agnostic request/response exchange."""

from __future__ import annotations

import logging

from ..protocol import fields
from ..protocol.message import Message
from ..protocol.wire import decode_header
from .base import Transport


logger = logging.getLogger(__name__)


class RequestSession:
    """Client-side request/response pattern logic.

    RexPro has no request multiplexing: a request is written, and the next
    frame read from the same connection is its response. Errors raised by
    the transport or the protocol layer propagate unchanged.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    def send(self, request: Message) -> None:
        packed = request.pack()
        self.transport.write(packed)
        logger.debug("sent message type %d, %d body bytes", request.message_type, request.length)

    def receive(self) -> Message:
        """Read one complete frame and return it as an unpacked Message."""

        header = decode_header(self.transport.read(fields.HEADER_SIZE))
        logger.debug("received header %r", header)

        response = Message.from_header(header)
        response.serialized = self.transport.read(header.length)
        return response.unpack()

    def exchange(self, request: Message) -> Message:
        self.send(request)
        return self.receive()
