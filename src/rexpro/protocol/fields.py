"""Protocol constants.

Keep these in one place to avoid magic numbers in message handling.
"""

# Header values.

PROTOCOL_VERSION = 1
SERIALIZER_JSON = 1
RESERVED = (0, 0, 0, 0)

HEADER_SIZE = 11
LENGTH_MAX = 0xFFFFFFFF

# Message type identifiers. 4 is reserved by the protocol and unassigned.

ERROR = 0
SESSION_REQUEST = 1
SESSION_RESPONSE = 2
SCRIPT_REQUEST = 3
SCRIPT_RESPONSE = 5

# Meta keys.

IN_SESSION = 'inSession'
ISOLATE = 'isolate'
TRANSACTION = 'transaction'
GRAPH_NAME = 'graphName'
GRAPH_OBJ_NAME = 'graphObjName'
CONSOLE = 'console'
KILL_SESSION = 'killSession'
FLAG = 'flag'

# Script languages.

GROOVY = 'groovy'
DEFAULT_LANGUAGE = GROOVY
