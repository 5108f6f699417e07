import pytest
import rexpro

from rexpro.protocol import errors, registry
from rexpro.protocol.request import ScriptRequest, SessionRequest
from rexpro.protocol.response import ErrorResponse, ScriptResponse, SessionResponse


def test_table():

    assert registry.variant_for_id(0) is ErrorResponse
    assert registry.variant_for_id(1) is SessionRequest
    assert registry.variant_for_id(2) is SessionResponse
    assert registry.variant_for_id(3) is ScriptRequest
    assert registry.variant_for_id(5) is ScriptResponse
    assert sorted(registry.variants) == [0, 1, 2, 3, 5]


def test_bijection():

    for message_type in registry.variants:
        variant = registry.variant_for_id(message_type)
        assert registry.id_for_variant(variant) == message_type
        assert registry.variant_for_id(registry.id_for_variant(variant)) is variant


def test_reserved_id():

    with pytest.raises(errors.UnknownMessageType) as caught:
        registry.variant_for_id(4)

    assert caught.value.message_type == 4


def test_unknown_ids():

    for bad in (-1, 6, 255, None, '3', True, [3]):
        assert registry.is_registered(bad) == False
        with pytest.raises(errors.UnknownMessageType):
            registry.variant_for_id(bad)


def test_id_for_instance():

    assert registry.id_for_variant(ScriptRequest()) == 3
    assert registry.id_for_variant(ErrorResponse()) == 0


def test_unregistered_variant():

    class Subclassed(ScriptRequest):
        pass

    with pytest.raises(errors.UnregisteredVariant):
        registry.id_for_variant(Subclassed)

    with pytest.raises(errors.UnregisteredVariant):
        registry.id_for_variant(Subclassed())

    with pytest.raises(errors.UnregisteredVariant):
        registry.id_for_variant(rexpro.protocol.body.Request)


def test_read_only():

    with pytest.raises(TypeError):
        registry.variants[4] = ScriptResponse


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
