""" The fixed mapping between RexPro message type identifiers, the single
    byte in the header that selects how a body is interpreted, and the body
    classes that implement them.
"""

import types

from . import fields
from .errors import UnknownMessageType, UnregisteredVariant
from .request import ScriptRequest, SessionRequest
from .response import ErrorResponse, ScriptResponse, SessionResponse


variants = types.MappingProxyType({
    fields.ERROR:            ErrorResponse,
    fields.SESSION_REQUEST:  SessionRequest,
    fields.SESSION_RESPONSE: SessionResponse,
    fields.SCRIPT_REQUEST:   ScriptRequest,
    fields.SCRIPT_RESPONSE:  ScriptResponse,
})

ids = types.MappingProxyType(dict((variant, id) for id, variant in variants.items()))


def is_registered(message_type):
    """ Return True if *message_type* is a known message type identifier.
    """

    # True and False would otherwise match 1 and 0.

    if isinstance(message_type, bool):
        return False

    try:
        return message_type in variants
    except TypeError:
        # Unhashable, definitely not registered.
        return False


def variant_for_id(message_type):
    """ Return the body class associated with the *message_type* identifier.
        An :class:`UnknownMessageType` exception is raised if there is no
        such identifier.
    """

    if not is_registered(message_type):
        raise UnknownMessageType(message_type)

    return variants[message_type]


def id_for_variant(variant):
    """ Return the message type identifier for *variant*, which can be either
        a body class or an instance of one. Only the registered classes
        themselves have identifiers; a subclass of a registered class does
        not inherit its parent's identifier.
    """

    if not isinstance(variant, type):
        variant = type(variant)

    try:
        return ids[variant]
    except KeyError:
        raise UnregisteredVariant(variant)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
