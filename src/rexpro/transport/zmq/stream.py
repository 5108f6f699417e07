"""ZeroMQ STREAM transport.

A STREAM socket exchanges raw TCP bytes with a peer that does not speak
ZeroMQ. Every inbound message is a two part sequence:

    routing_id, data

An empty *data* part signals a connection event: the first one after
connect() means the connection is established, any later one means the
peer disconnected. Outbound messages carry the same routing id; sending an
empty *data* part closes the connection.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import zmq

from ... import config
from ..base import Transport, TransportConnectionError, TransportReadError, TransportTimeout, TransportWriteError
from . import zmq_context


logger = logging.getLogger(__name__)


class StreamTransport(Transport):
    """Raw TCP connection to a RexPro server via a ZeroMQ STREAM socket."""

    def __init__(self, address: str, port: int, timeout: Optional[float] = None):
        self.address = address
        self.port = int(port)
        self.timeout = config.timeout if timeout is None else float(timeout)

        self.socket: Optional[zmq.Socket] = None
        self._routing_id: Optional[bytes] = None
        self._buffer = bytearray()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.address!r}, {self.port})"

    @property
    def is_open(self) -> bool:
        return self._routing_id is not None

    def _poll(self, deadline: float) -> bool:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return False
        return bool(self.socket.poll(int(remaining * 1000) + 1, zmq.POLLIN))

    def open(self) -> None:
        if self.is_open:
            return

        server = f"tcp://{self.address}:{self.port}"

        # A socket whose peer disconnected is not reusable.
        self._discard()

        self.socket = zmq_context.socket(zmq.STREAM)
        self.socket.setsockopt(zmq.LINGER, 0)

        try:
            self.socket.connect(server)
        except zmq.ZMQError as exc:
            self._discard()
            raise TransportConnectionError(f"cannot connect to {server}: {exc}") from exc

        # ZeroMQ reconnects quietly in the background; the only indication
        # of success is the connection notification.

        deadline = time.monotonic() + self.timeout
        if not self._poll(deadline):
            self._discard()
            raise TransportConnectionError(f"no connection to {server} in {self.timeout:.2f} sec")

        routing_id, _notify = self.socket.recv_multipart()

        self._routing_id = routing_id
        self._buffer.clear()
        logger.debug("connected to %s", server)

    def close(self) -> None:
        if self.socket is None:
            return

        if self._routing_id is not None:
            try:
                self.socket.send_multipart((self._routing_id, b""), flags=zmq.NOBLOCK)
            except zmq.ZMQError:
                # The peer already went away.
                pass
            logger.debug("disconnected from %s:%d", self.address, self.port)

        self._discard()

    def _discard(self) -> None:
        if self.socket is not None:
            self.socket.close(linger=0)
        self.socket = None
        self._routing_id = None
        self._buffer.clear()

    def write(self, data: bytes) -> None:
        if not self.is_open:
            raise TransportWriteError(f"{self!r} is not connected")

        try:
            self.socket.send_multipart((self._routing_id, bytes(data)))
        except zmq.ZMQError as exc:
            raise TransportWriteError(f"cannot write to {self.address}:{self.port}: {exc}") from exc

        logger.debug("wrote %d bytes to %s:%d", len(data), self.address, self.port)

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"cannot read {size} bytes")

        if not self.is_open:
            raise TransportReadError(f"{self!r} is not connected")

        deadline = time.monotonic() + self.timeout
        buffer = self._buffer

        while len(buffer) < size:
            if not self._poll(deadline):
                raise TransportTimeout(
                    f"{self.address}:{self.port}: {len(buffer)} of {size} bytes in {self.timeout:.2f} sec"
                )

            routing_id, data = self.socket.recv_multipart()
            if routing_id != self._routing_id:
                continue

            if data == b"":
                self._routing_id = None
                raise TransportReadError(
                    f"{self.address}:{self.port} closed the connection after {len(buffer)} of {size} bytes"
                )

            buffer.extend(data)

        chunk = bytes(buffer[:size])
        del buffer[:size]
        return chunk
