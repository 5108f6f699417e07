""" Request bodies: the messages a client sends to a RexPro server.
"""

from . import fields
from .body import Request, check_mapping, mapping
from .errors import MalformedBody


class SessionRequest(Request):
    """ Request that the server open (or, with the *killSession* meta option,
        close) a session. There is no payload beyond the common body fields.
    """

    meta_keys = frozenset((
        fields.GRAPH_NAME,
        fields.GRAPH_OBJ_NAME,
        fields.KILL_SESSION,
    ))


# end of class SessionRequest



class ScriptRequest(Request):
    """ Request that the server evaluate a script. The *script* is written
        in the named *language*; any variables it references can be supplied
        as *bindings*, a dictionary mapping parameter names to values.

        The positional form on the wire is::

            [session, request, meta, language, script, bindings]
    """

    meta_keys = frozenset((
        fields.IN_SESSION,
        fields.ISOLATE,
        fields.TRANSACTION,
        fields.GRAPH_NAME,
        fields.GRAPH_OBJ_NAME,
        fields.CONSOLE,
    ))

    slots = 6

    def __init__(self, script=None, bindings=None, language=fields.DEFAULT_LANGUAGE):

        Request.__init__(self)

        self._language = None
        self._script = None
        self._bindings = dict()

        self.language = language

        if script is not None:
            self.script = script

        if bindings is not None:
            self.bindings = bindings


    @property
    def language(self):
        return self._language


    @language.setter
    def language(self, language):

        if not isinstance(language, str):
            raise TypeError('language must be a string, not ' + type(language).__name__)

        self._language = language


    @property
    def script(self):
        return self._script


    @script.setter
    def script(self, script):

        if not isinstance(script, str):
            raise TypeError('script must be a string, not ' + type(script).__name__)

        self._script = script


    @property
    def bindings(self):
        return self._bindings


    @bindings.setter
    def bindings(self, bindings):

        if bindings is None:
            bindings = dict()

        try:
            bindings = dict(bindings)
        except (TypeError, ValueError):
            raise TypeError('bindings must be a dictionary, not ' + type(bindings).__name__)

        self._bindings = bindings


    def to_positional(self):

        positional = Request.to_positional(self)
        positional.append(self.language)
        positional.append(self.script)
        positional.append(mapping(self.bindings))

        return positional


    def _from_positional(self, raw):

        values = Request._from_positional(self, raw)

        language = raw[3]
        script = raw[4]

        if not isinstance(language, str):
            raise MalformedBody('ScriptRequest language must be a string, not ' + type(language).__name__)

        if not isinstance(script, str):
            raise MalformedBody('ScriptRequest script must be a string, not ' + type(script).__name__)

        values['language'] = language
        values['script'] = script
        values['bindings'] = check_mapping(raw[5], 'bindings', self)

        return values


# end of class ScriptRequest


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
