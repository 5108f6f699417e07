""" Python client for RexPro, the binary protocol used to submit scripts to
    a Rexster graph server and receive typed results. This includes the
    message framing and body marshalling (:mod:`rexpro.protocol`), and a
    minimal transport and client to exchange messages with a server.
"""

# Utility components.

from . import json
from . import config

# The protocol layer has no dependency on anything below.

from . import protocol
from .protocol import Message, PROTOCOL_VERSION
from .protocol import SessionRequest, ScriptRequest
from .protocol import SessionResponse, ScriptResponse, ErrorResponse
from .protocol.errors import *

# Primary public-facing interface. The transport package, and the backend
# it loads, is imported when a client first connects.

from .client import Client

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
