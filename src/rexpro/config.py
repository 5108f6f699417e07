""" Process-wide defaults for RexPro clients. Each value can be overridden
    by an environment variable of the same name prefixed with ``REXPRO_``;
    the environment is consulted once, at import time.
"""

import os

from .protocol import fields


default_port = 8184

# Transport backend used by :mod:`rexpro.transport`.

transport = os.environ.get('REXPRO_TRANSPORT', 'zmq')

# Seconds to wait for a connection to be established, or for any single
# read to complete, before giving up.

timeout = float(os.environ.get('REXPRO_TIMEOUT', 30.0))

# Scripting language for requests built by rexpro.protocol.factory.script(),
# and so by Client.execute_script(). ScriptRequest itself defaults to groovy.

language = os.environ.get('REXPRO_LANGUAGE', fields.DEFAULT_LANGUAGE)


def parse_address(address):
    """ Split a server *address* into a (hostname, port) tuple. Accepted forms
        are 'tcp://host:port', 'host:port', and a bare 'host', in which case
        the default RexPro port is assumed.
    """

    if address is None or address == '':
        raise ValueError('no server address specified')

    if '://' in address:
        scheme, address = address.split('://', 1)
        if scheme != 'tcp':
            raise ValueError('unsupported address scheme: ' + repr(scheme))

    if address.startswith('['):
        # IPv6 literal, such as [::1]:8184.
        hostname, _sep, remainder = address[1:].partition(']')
        port = remainder.lstrip(':')
    elif address.count(':') == 1:
        hostname, port = address.split(':')
    else:
        hostname = address
        port = ''

    if hostname == '':
        raise ValueError('no hostname in address: ' + repr(address))

    if port == '':
        port = default_port
    else:
        try:
            port = int(port)
        except ValueError:
            raise ValueError('invalid port in address: ' + repr(address))

    if port < 1 or port > 65535:
        raise ValueError('port out of range: ' + str(port))

    return (hostname, port)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
