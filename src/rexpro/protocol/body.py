""" Base classes for RexPro message bodies. A body is the part of a message
    that follows the fixed header; on the wire it is a JSON array with a
    fixed sequence of slots for each message type. The concrete variants are
    defined in :mod:`rexpro.protocol.request` and
    :mod:`rexpro.protocol.response`.
"""

from .errors import InvalidMeta, MalformedBody
from .identifier import NULL_SESSION, new_identifier


class Body:
    """ The :class:`Body` encapsulates the fields common to every RexPro
        message body, in the order they appear on the wire: the *session*
        identifier, the *request* identifier, and the *meta* dictionary of
        auxiliary options.

        Subclasses extend the positional form by overriding
        :func:`to_positional` and :func:`_from_positional`, and declare the
        meta keys they accept via the *meta_keys* set.

        :ivar session: Identifier of the session this message belongs to.
        :ivar request: Identifier unique to this message.
        :ivar meta_keys: A set of valid keys for the meta dictionary.
        :ivar slots: The minimum number of positional slots on the wire.
    """

    meta_keys = frozenset()
    slots = 3

    def __init__(self):

        self.session = None
        self.request = None
        self._meta = dict()


    def __eq__(self, other):

        if type(self) is not type(other):
            return NotImplemented

        return self.to_positional() == other.to_positional()


    __hash__ = None


    def __repr__(self):
        return type(self).__name__ + repr(self.to_positional())


    @property
    def meta(self):
        return self._meta


    @meta.setter
    def meta(self, meta):
        self.set_meta(meta)


    def allowed_meta_keys(self):
        """ Return the set of keys accepted in the meta dictionary for this
            type of body.
        """

        return frozenset(self.meta_keys)


    def set_meta(self, meta):
        """ Replace the meta dictionary. Every key in the supplied *meta* is
            checked against :func:`allowed_meta_keys`; if any are not accepted
            an :class:`InvalidMeta` exception is raised naming all of them,
            and the existing meta dictionary is left untouched.
        """

        if meta is None:
            meta = dict()

        try:
            meta = dict(meta)
        except (TypeError, ValueError):
            raise TypeError('meta must be a dictionary, not ' + type(meta).__name__)

        allowed = self.allowed_meta_keys()
        invalid = list()

        for key in meta:
            if key not in allowed:
                invalid.append(key)

        if invalid:
            raise InvalidMeta(type(self).__name__, invalid)

        self._meta = meta
        return self


    def to_positional(self):
        """ Return the list of values for this body, in the exact slot order
            used on the wire.
        """

        return [self.session, self.request, mapping(self._meta)]


    def hydrate(self, raw):
        """ Populate this body from *raw*, the decoded positional form
            received from the wire. All slots are checked before anything is
            assigned; a :class:`MalformedBody` exception leaves the body
            as it was.
        """

        if not isinstance(raw, (list, tuple)):
            raise MalformedBody('%s body must be an array, not %s' % (type(self).__name__, type(raw).__name__))

        if len(raw) < self.slots:
            raise MalformedBody('%s body requires %d elements, received %d' % (type(self).__name__, self.slots, len(raw)))

        values = self._from_positional(raw)

        # The meta dictionary is the only field that can still be rejected;
        # assign it first so that a rejection doesn't leave the other fields
        # half-populated.

        self.set_meta(values.pop('meta'))

        for name, value in values.items():
            setattr(self, name, value)

        return self


    def _from_positional(self, raw):
        """ Return a dictionary of attribute names and values extracted from
            the positional form *raw*, which is known to be long enough.
        """

        values = dict()
        values['session'] = check_string(raw[0], 'session', self)
        values['request'] = check_string(raw[1], 'request', self)
        values['meta'] = check_mapping(raw[2], 'meta', self)

        return values


# end of class Body



class Request(Body):
    """ A :class:`Request` is any body sent from a client to the server.
        Every new request starts out with no session, and a freshly generated
        request identifier.
    """

    def __init__(self):

        Body.__init__(self)

        self.session = NULL_SESSION
        self.request = new_identifier()


# end of class Request



class Response(Body):
    """ A :class:`Response` is any body sent from the server to a client.
        If *raw* is provided the new instance is immediately hydrated from
        it; otherwise the instance is empty.
    """

    def __init__(self, raw=None):

        Body.__init__(self)

        if raw is not None:
            self.hydrate(raw)


# end of class Response



def mapping(value):
    """ Return *value* in a form that will be encoded as a JSON object. An
        empty or missing dictionary still needs to go out as {} rather than
        [] or null; the server distinguishes between them.
    """

    if value:
        return dict(value)

    return dict()


def check_mapping(value, name, body):
    """ Validate a mapping slot in a decoded body. A missing (null) value is
        treated as an empty dictionary; anything else that is not a
        dictionary is malformed.
    """

    if value is None:
        return dict()

    if isinstance(value, dict):
        return value

    raise MalformedBody('%s %s must be an object, not %s' % (type(body).__name__, name, type(value).__name__))


def check_string(value, name, body):
    """ Validate a string slot in a decoded body.
    """

    if isinstance(value, str):
        return value

    raise MalformedBody('%s %s must be a string, not %s' % (type(body).__name__, name, type(value).__name__))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
