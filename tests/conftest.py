import pytest

from rexpro.transport.base import Transport, TransportReadError


class MemoryTransport(Transport):
    """ In-memory stand-in for a connection: reads are served from the
        *incoming* bytes, writes are collected in *written*.
    """

    def __init__(self, incoming=b''):
        self.incoming = bytearray(incoming)
        self.written = list()
        self.opened = False
        self.closed = False

    @property
    def is_open(self):
        return self.opened and not self.closed

    def open(self):
        self.opened = True

    def close(self):
        self.closed = True

    def write(self, data):
        self.written.append(bytes(data))

    def read(self, size):
        if len(self.incoming) < size:
            raise TransportReadError('short read: %d of %d bytes' % (len(self.incoming), size))

        chunk = bytes(self.incoming[:size])
        del self.incoming[:size]
        return chunk


@pytest.fixture
def memory_transport():
    return MemoryTransport


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
