""" A class representation of a complete RexPro message: the fixed header,
    and the body that follows it.
"""

from . import fields
from . import registry
from . import serializer as serializers
from . import wire
from .body import Body
from .errors import NoBody, NoSerializedBody, UnknownMessageType, UnsupportedSerializer


class Message:
    """ The :class:`Message` ties a :class:`rexpro.protocol.body.Body` to the
        header fields that frame it on the wire. A message is used in one of
        two directions:

        * Outbound, a body is assigned and :func:`pack` returns the bytes to
          send. The message type and body length are derived from the body.

        * Inbound, the header fields are populated from the header bytes read
          off the wire (see :func:`from_header`), the body bytes are assigned
          to :attr:`serialized`, and :func:`unpack` hydrates the appropriate
          body variant.

        The message type, body length, and serialized body are computed on
        demand and cached; assigning a new body discards the cached values.
        A :class:`Message` instance represents one request or one response,
        it is not meant to be re-used or shared between threads.

        :ivar version: The protocol version, a single unsigned byte.
        :ivar serializer: The serializer type id; only JSON (1) is valid.
    """

    def __init__(self, body=None, version=fields.PROTOCOL_VERSION, serializer=fields.SERIALIZER_JSON):

        self._version = None
        self._serializer = None
        self._message_type = None
        self._length = None
        self._body = None
        self._serialized = None

        # Header fields assigned directly, as opposed to derived from the
        # body. Derived values are discarded along with the body.

        self._assigned = set()

        self.version = version
        self.serializer = serializer

        if body is not None:
            self.body = body


    @classmethod
    def from_header(cls, header):
        """ Return a new :class:`Message` with its header fields populated
            from *header*, either the 11 raw header bytes or a
            :class:`rexpro.protocol.wire.Header` instance. The serialized
            body still needs to be assigned before calling :func:`unpack`.
        """

        if not isinstance(header, wire.Header):
            header = wire.decode_header(header)

        message = cls(version=header.version, serializer=header.serializer)
        message.message_type = header.message_type
        message.length = header.length

        return message


    def __repr__(self):

        return '%s(version=%r, serializer=%r, message_type=%r, length=%r, body=%r)' % (
            type(self).__name__, self._version, self._serializer,
            self._message_type, self._length, self._body)


    def __bytes__(self):
        return self.pack()


    @property
    def version(self):
        return self._version


    @version.setter
    def version(self, version):

        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError('protocol version must be an integer, not ' + type(version).__name__)

        if version < 0 or version > 0xFF:
            raise ValueError('protocol version must fit in one byte: ' + str(version))

        self._version = version


    @property
    def serializer(self):
        return self._serializer


    @serializer.setter
    def serializer(self, serializer):

        if not serializers.is_supported(serializer):
            raise UnsupportedSerializer(serializer)

        self._serializer = serializer


    @property
    def reserved(self):
        """ The reserved header bytes. These are always zero; assignment is
            accepted and ignored.
        """

        return fields.RESERVED


    @reserved.setter
    def reserved(self, reserved):
        pass


    @property
    def body(self):
        return self._body


    @body.setter
    def body(self, body):

        if body is not None and not isinstance(body, Body):
            raise TypeError('message body must be a Body instance, not ' + type(body).__name__)

        self._body = body
        self._message_type = None
        self._length = None
        self._serialized = None
        self._assigned.clear()


    @property
    def message_type(self):
        """ The message type id. If it was not set explicitly it is derived
            from the registered type of the current body, or None if there
            is no body.
        """

        if self._message_type is None and self._body is not None:
            self._message_type = registry.id_for_variant(self._body)

        return self._message_type


    @message_type.setter
    def message_type(self, message_type):

        if message_type is not None and not registry.is_registered(message_type):
            raise UnknownMessageType(message_type)

        self._message_type = message_type

        if message_type is None:
            self._assigned.discard('message_type')
        else:
            self._assigned.add('message_type')


    @property
    def length(self):
        """ The length of the serialized body, in bytes. If it was not set
            explicitly it is measured from the serialized body, serializing
            the current body first if necessary.
        """

        if self._length is None:
            serialized = self.serialized
            if serialized is not None:
                self._length = len(serialized)

        return self._length


    @length.setter
    def length(self, length):

        if length is not None:
            wire.encode_length(length)

        self._length = length

        if length is None:
            self._assigned.discard('length')
        else:
            self._assigned.add('length')


    @property
    def serialized(self):
        """ The serialized body. If it was not set explicitly it is generated
            from the current body, or None if there is no body.
        """

        if self._serialized is None and self._body is not None:
            self._serialized = serializers.encode(self._serializer, self._body.to_positional())

        return self._serialized


    @serialized.setter
    def serialized(self, serialized):

        if serialized is not None:
            serialized = bytes(serialized)

        # The serialized form is now authoritative; any typed body is
        # regenerated by unpack(). Header values derived from the old body
        # no longer apply, those read from the wire still do.

        self._serialized = serialized
        self._body = None

        if 'message_type' not in self._assigned:
            self._message_type = None

        if 'length' not in self._assigned:
            self._length = None


    def pack(self):
        """ Return the complete message, header and body, as bytes ready to
            be written to the wire. A :class:`NoBody` exception is raised if
            there is no body to pack.
        """

        body = self._body

        if body is None:
            raise NoBody('there is no message body to pack')

        self._message_type = None
        self._length = None
        self._serialized = None
        self._assigned.clear()

        frame = wire.pack_frame(body, self._version, self._serializer)

        self._message_type = frame.message_type
        self._length = frame.length
        self._serialized = frame.payload

        return frame.frame


    def unpack(self):
        """ Hydrate the body from the serialized body bytes, using the
            message type to select the body variant. The hydrated body
            replaces the serialized bytes; the message is returned.
        """

        if self._serialized is None:
            raise NoSerializedBody('there is currently no serialized message body, nothing to unpack')

        header = wire.Header(self._version, self._serializer, self._message_type, self.length)
        decoded = wire.unpack_frame(header, self._serialized)

        self._body = decoded.body
        self._serialized = None

        return self


# end of class Message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
