""" Session and request identifiers. Identifiers only need to be unique
    enough to correlate a response with its request; they are not used for
    anything security related.
"""

import uuid


# A session identifier of all zeros indicates the message is not associated
# with any server-side session.

NULL_SESSION = '00000000-0000-0000-0000-000000000000'


def new_identifier():
    """ Return a new random (version 4) UUID as a 36 character string.
    """

    return str(uuid.uuid4())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
