import pytest
import rexpro

from rexpro.protocol import errors, registry, wire
from rexpro.protocol.identifier import NULL_SESSION
from rexpro.protocol.message import Message
from rexpro.protocol.request import ScriptRequest, SessionRequest
from rexpro.protocol.response import ErrorResponse, ScriptResponse, SessionResponse


def receive(packed):
    """ Mimic what a client does with a received frame: populate a new
        message from the header, assign the body bytes, and unpack it.
    """

    header, payload = wire.split_frame(packed)
    message = Message.from_header(header)
    message.serialized = payload
    return message.unpack()


def sample_bodies():

    script = ScriptRequest('g.V().has("name", name)', {'name': 'Gödel'})
    script.meta = {'graphName': 'graph', 'isolate': False}

    session = SessionRequest()
    session.meta = {'graphName': 'graph'}

    bodies = list()
    bodies.append(script)
    bodies.append(session)
    bodies.append(ScriptResponse(['s1', 'r1', {}, [{'name': 'a'}, 1, 'two'], {'x': 1}]))
    bodies.append(SessionResponse(['s1', 'r1', {}]))
    bodies.append(ErrorResponse(['s1', 'r1', {'flag': 1}, 'bad script']))

    return bodies


def test_defaults():

    message = Message()

    assert message.version == 1
    assert message.serializer == 1
    assert message.reserved == (0, 0, 0, 0)
    assert message.body is None
    assert message.message_type is None
    assert message.length is None
    assert message.serialized is None


def test_round_trip():

    for body in sample_bodies():
        packed = Message(body).pack()
        received = receive(packed)

        assert type(received.body) is type(body)
        assert received.body == body
        assert received.body is not body
        assert received.body.session == body.session
        assert received.body.request == body.request
        assert received.message_type == registry.id_for_variant(body)


def test_scenario_script_request():

    request = ScriptRequest('g.V()', language='default')
    request.meta = {'graphName': 'g'}

    message = Message(request)
    packed = message.pack()

    positional = rexpro.json.loads(packed[11:])
    assert positional == [NULL_SESSION, request.request, {'graphName': 'g'}, 'default', 'g.V()', {}]
    assert packed[6] == 3
    assert message.message_type == 3

    # Empty bindings go out as an object, not an array.

    assert packed.endswith(b'{}]')


def test_scenario_script_response():

    payload = b'["s1","r1",{}, [{"name":"a"}], {}]'

    message = Message()
    message.message_type = 5
    message.length = len(payload)
    message.serialized = payload
    message.unpack()

    body = message.body
    assert isinstance(body, ScriptResponse)
    assert body.session == 's1'
    assert body.request == 'r1'
    assert body.meta == {}
    assert body.results == [{'name': 'a'}]
    assert body.bindings == {}


def test_scenario_error_response():

    payload = '["s1","r1",{"flag":1},"bad script"]'.encode()
    header = wire.encode_header(1, 1, 0, len(payload))

    message = receive(header + payload)

    assert isinstance(message.body, ErrorResponse)
    assert message.body.error_message == 'bad script'
    assert message.body.meta == {'flag': 1}


def test_scenario_reserved_type():

    with pytest.raises(errors.UnknownMessageType):
        registry.variant_for_id(4)

    with pytest.raises(errors.UnknownMessageType):
        Message().message_type = 4


def test_scenario_no_body():

    message = Message()

    with pytest.raises(errors.NoBody):
        message.pack()

    # Nothing was computed or cached along the way.

    assert message.message_type is None
    assert message.length is None
    assert message.serialized is None


def test_unpack_without_body():

    message = Message.from_header(wire.Header(1, 1, 5, 0))

    with pytest.raises(errors.NoSerializedBody):
        message.unpack()


def test_unpack_empty_body():

    # A zero-length body that was actually read is a malformed frame, not
    # a missing one.

    message = Message.from_header(wire.Header(1, 1, 5, 0))
    message.serialized = b''

    with pytest.raises(errors.MalformedBody):
        message.unpack()


def test_serialized_after_pack():

    message = Message(ScriptRequest('g.V()'))
    message.pack()

    assert message.message_type == 3
    assert message.length > 20

    payload = b'["s1","r1",{},"bad"]'
    message.serialized = payload

    assert message.body is None
    assert message.length == len(payload)
    assert message.message_type is None

    message.message_type = 0
    message.unpack()

    assert isinstance(message.body, ErrorResponse)
    assert message.body.error_message == 'bad'


def test_serialized_keeps_header():

    payload = b'["s1","r1",{},"bad script"]'

    message = Message.from_header(wire.Header(1, 1, 0, len(payload)))
    message.serialized = payload

    assert message.message_type == 0
    assert message.length == len(payload)

    message.unpack()
    assert message.body.error_message == 'bad script'

    # A new body discards the header values along with everything else.

    message.body = SessionRequest()
    assert message.message_type == 1
    assert message.length == len(message.serialized)


def test_header_length_invariant():

    for script in ('g.V()', 'g.V().has("name", "Gödel")', '東京 🙂'):
        message = Message(ScriptRequest(script))
        packed = message.pack()

        header = wire.decode_header(packed)
        assert header.length == len(packed) - 11
        assert header.length == message.length
        assert header.length == len(message.serialized)


def test_lazy_derivation():

    request = ScriptRequest('g.V()')
    message = Message(request)

    assert message.message_type == 3
    serialized = message.serialized
    assert rexpro.json.loads(serialized) == request.to_positional()
    assert message.length == len(serialized)

    # Cached: repeated access returns the same object.

    assert message.serialized is serialized


def test_new_body_resets_caches():

    message = Message(ScriptRequest('g.V()'))
    message.pack()
    first_length = message.length

    message.body = SessionRequest()

    assert message.message_type == 1
    assert message.length != first_length
    assert rexpro.json.loads(message.serialized)[2] == {}


def test_pack_discards_decode_state():

    payload = b'["s1","r1",{},"bad script"]'
    message = Message.from_header(wire.Header(1, 1, 0, len(payload)))
    message.serialized = payload
    message.unpack()

    message.body = ScriptRequest('g.V().count()')
    packed = message.pack()

    header = wire.decode_header(packed)
    assert header.message_type == 3
    assert header.length == len(packed) - 11
    assert message.length == header.length


def test_pack_recomputes():

    request = ScriptRequest('g.V()')
    message = Message(request)
    first = message.pack()

    request.script = 'g.V().has("name", "Gödel")'
    message.length = 5
    second = message.pack()

    assert second != first
    assert wire.decode_header(second).length == len(second) - 11


def test_unregistered_body():

    class Subclassed(ScriptRequest):
        pass

    message = Message(Subclassed('g.V()'))

    with pytest.raises(errors.UnregisteredVariant):
        message.pack()


def test_header_validation():

    message = Message()

    with pytest.raises(errors.UnsupportedSerializer):
        message.serializer = 2

    with pytest.raises(TypeError):
        message.version = '1'

    with pytest.raises(ValueError):
        message.version = 256

    with pytest.raises(errors.InvalidLength):
        message.length = -1

    with pytest.raises(TypeError):
        message.body = 'g.V()'

    message.reserved = (1, 2, 3, 4)
    assert message.reserved == (0, 0, 0, 0)

    with pytest.raises(errors.UnsupportedSerializer):
        Message.from_header(b'\x01\x02\x00\x00\x00\x00\x05\x00\x00\x00\x02')


def test_from_header_bytes():

    message = Message.from_header(b'\x02\x01\x00\x00\x00\x00\x05\x00\x00\x00\x2a')

    assert message.version == 2
    assert message.serializer == 1
    assert message.message_type == 5
    assert message.length == 42


def test_unpack_malformed():

    payload = b'["s1","r1",{}]'
    message = Message.from_header(wire.Header(1, 1, 5, len(payload)))
    message.serialized = payload

    with pytest.raises(errors.MalformedBody):
        message.unpack()

    # The serialized body is still there, nothing was hydrated.

    assert message.body is None
    assert message.serialized == payload


def test_bytes():

    request = ScriptRequest('g.V()')
    packed = bytes(Message(request))

    assert receive(packed).body == request


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
