""" Client functions for submitting scripts to a RexPro server. A
    :class:`Client` opens a fresh connection for each request, and closes it
    once the response has been read.
"""

import logging

from . import config
from .protocol import factory


logger = logging.getLogger(__name__)


class Client:
    """ Send requests to the RexPro server at *address*, which can be of the
        form 'tcp://host:port', 'host:port', or just 'host'. The optional
        *timeout*, in seconds, bounds both connecting and each read.

        Typical use::

            client = rexpro.Client('tcp://localhost:8184')
            response = client.execute_script('g.V().count()', 'graph')

            if isinstance(response.body, rexpro.ErrorResponse):
                ...
    """

    transport_class = None

    def __init__(self, address, timeout=None):

        self.hostname, self.port = config.parse_address(address)
        self.timeout = timeout

        self.transport = None
        self.session = None


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    def _connect(self):

        self.close()

        # The transport package loads its backend, and pyzmq with it, on
        # first use.

        from . import transport
        from .transport.session import RequestSession

        transport_class = self.transport_class
        if transport_class is None:
            transport_class = transport.default

        connection = transport_class(self.hostname, self.port, self.timeout)
        connection.open()

        self.transport = connection
        self.session = RequestSession(connection)


    def close(self):
        """ Close the connection to the server, if there is one.
        """

        connection = self.transport
        self.transport = None
        self.session = None

        if connection is not None:
            connection.close()


    def send(self, message):
        """ Open a new connection and write the packed *message* to it. The
            response must be collected with :func:`get_response`.
        """

        self._connect()

        try:
            self.session.send(message)
        except Exception:
            self.close()
            raise


    def get_response(self):
        """ Read the response to the most recent :func:`send`, and close the
            connection. The returned :class:`rexpro.protocol.message.Message`
            carries a ScriptResponse, SessionResponse, or ErrorResponse body.
        """

        if self.session is None:
            raise RuntimeError('no request has been sent')

        try:
            response = self.session.receive()
        finally:
            self.close()

        return response


    def request(self, message):
        """ Send *message* and return the response.
        """

        self.send(message)
        return self.get_response()


    def execute_script(self, script, graph_name=None, bindings=None, **meta):
        """ Run *script* against the graph named *graph_name*, with the
            optional *bindings* for any parameters the script references.
            Additional keyword arguments are meta options for the request.
        """

        message = factory.script(script, graph_name, bindings, **meta)
        logger.debug('executing script on %s:%d: %s', self.hostname, self.port, script)

        return self.request(message)


# end of class Client


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
