"""Convenience constructors for protocol messages."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from . import fields
from .identifier import NULL_SESSION
from .message import Message
from .request import ScriptRequest, SessionRequest


def script(
    script: str,
    graph_name: Optional[str] = None,
    bindings: Optional[Mapping[str, Any]] = None,
    *,
    language: Optional[str] = None,
    session: Optional[str] = None,
    **meta,
) -> Message:
    """Wrap a ScriptRequest for *script* in a Message.

    The *language* defaults to ``rexpro.config.language``. Extra keyword
    arguments are meta options, subject to the usual allow-list
    (``isolate=False``, ``transaction=True``, ...).
    """

    if language is None:
        # rexpro.config imports this package.
        from .. import config

        language = config.language

    body = ScriptRequest(script, bindings, language)

    if graph_name is not None:
        meta[fields.GRAPH_NAME] = graph_name
    if session is not None:
        body.session = session
        meta.setdefault(fields.IN_SESSION, True)

    body.set_meta(meta)
    return Message(body)


def session(graph_name: Optional[str] = None, **meta) -> Message:
    """Wrap a SessionRequest opening a new session in a Message."""

    body = SessionRequest()
    if graph_name is not None:
        meta[fields.GRAPH_NAME] = graph_name

    body.set_meta(meta)
    return Message(body)


def kill_session(session: str) -> Message:
    """Wrap a SessionRequest closing *session* in a Message."""

    if session == NULL_SESSION:
        raise ValueError("cannot close the null session")

    body = SessionRequest()
    body.session = session
    body.set_meta({fields.KILL_SESSION: True})
    return Message(body)
