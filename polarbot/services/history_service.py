"""
In-process conversation history, keyed by session id.

Nothing is persisted. At most HISTORY_MAX_SESSIONS sessions are kept (least
recently written dropped first), each trimmed to its last HISTORY_MAX_MESSAGES.
"""

from collections import OrderedDict
from datetime import datetime, timezone
from typing import List

from loguru import logger

from polarbot.config import settings
from polarbot.models.schemas import ConversationExport, ConversationMessage

_sessions: "OrderedDict[str, List[ConversationMessage]]" = OrderedDict()


def has_session(session_id: str) -> bool:
    return session_id in _sessions


def session_ids() -> List[str]:
    return list(_sessions)


def get_messages(session_id: str) -> List[ConversationMessage]:
    """Return a copy of the session's messages, oldest first."""
    return list(_sessions.get(session_id, []))


def append_message(session_id: str, role: str, content: str) -> ConversationMessage:
    message = ConversationMessage(role=role, content=content)
    messages = _sessions.setdefault(session_id, [])
    messages.append(message)
    _sessions.move_to_end(session_id)

    overflow = len(messages) - settings.HISTORY_MAX_MESSAGES
    if overflow > 0:
        del messages[:overflow]

    while len(_sessions) > settings.HISTORY_MAX_SESSIONS:
        evicted, dropped = _sessions.popitem(last=False)
        logger.info(f"Evicted session [{evicted[:8]}] ({len(dropped)} messages)")
    return message


def reset_session(session_id: str) -> int:
    """Drop a session's history; returns how many messages were removed."""
    removed = len(_sessions.pop(session_id, []))
    logger.info(f"Reset session [{session_id[:8]}] ({removed} messages)")
    return removed


def export_session(session_id: str) -> ConversationExport:
    messages = get_messages(session_id)
    return ConversationExport(
        session_id=session_id,
        exported_at=datetime.now(timezone.utc),
        message_count=len(messages),
        messages=messages,
    )


def clear_all() -> None:
    _sessions.clear()
