""" Response bodies: the messages a RexPro server sends back to a client.
    Each can be constructed empty, or hydrated immediately from the decoded
    positional form received on the wire.
"""

from . import fields
from .body import Response, check_mapping, check_string, mapping


class SessionResponse(Response):
    """ Acknowledgement that a session was opened or closed. There is no
        payload beyond the common body fields.
    """

    pass


# end of class SessionResponse



class ScriptResponse(Response):
    """ The outcome of a :class:`rexpro.protocol.request.ScriptRequest`.
        The *results* are the values produced by the script, in order; the
        *bindings* are echoed back from the request.

        The positional form on the wire is::

            [session, request, meta, results, bindings]
    """

    slots = 5

    def __init__(self, raw=None):

        self.results = list()
        self.bindings = dict()

        Response.__init__(self, raw)


    def to_positional(self):

        positional = Response.to_positional(self)
        positional.append(list(self.results or ()))
        positional.append(mapping(self.bindings))

        return positional


    def _from_positional(self, raw):

        values = Response._from_positional(self, raw)

        # A script with no results may come back with a null, or with a
        # lone scalar; either way there is no sequence of results.

        results = raw[3]
        if not isinstance(results, list):
            results = list()

        values['results'] = results
        values['bindings'] = check_mapping(raw[4], 'bindings', self)

        return values


# end of class ScriptResponse



class ErrorResponse(Response):
    """ The server could not handle a request. The *error_message* is the
        server's description of what went wrong; the *flag* meta option
        classifies the failure.

        The positional form on the wire is::

            [session, request, meta, error_message]
    """

    meta_keys = frozenset((fields.FLAG,))
    slots = 4

    def __init__(self, raw=None):

        self.error_message = None

        Response.__init__(self, raw)


    def __str__(self):
        return str(self.error_message)


    def to_positional(self):

        positional = Response.to_positional(self)
        positional.append(self.error_message)

        return positional


    def _from_positional(self, raw):

        values = Response._from_positional(self, raw)
        values['error_message'] = check_string(raw[3], 'error_message', self)

        return values


# end of class ErrorResponse


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
