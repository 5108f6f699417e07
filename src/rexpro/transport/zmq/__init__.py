"""ZeroMQ transport for RexPro.

RexPro servers speak plain TCP, not ZMTP; the STREAM socket type lets a
ZeroMQ context exchange raw bytes with such a peer.
"""

import zmq

zmq_context = zmq.Context()

from . import stream
