"""
Text chat endpoint plus conversation history / export / reset.
"""

import uuid
from typing import List

from fastapi import APIRouter, HTTPException, Request
from loguru import logger

from polarbot.middleware.rate_limit import CHAT_LIMIT, limiter
from polarbot.models.schemas import (
    ConversationExport,
    ConversationMessage,
    TextChatRequest,
    TextChatResponse,
)
from polarbot.services import ai_service, history_service
from polarbot.services.language_service import resolve_language

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("/text", response_model=TextChatResponse)
@limiter.limit(CHAT_LIMIT)
async def text_chat(req: TextChatRequest, request: Request):
    """
    Send a message, get Polar's reply. Uses the LLM when AI mode is on and
    the provider is reachable, otherwise the curated topic responses.
    """
    message = req.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message must not be empty")

    session_id = req.session_id or str(uuid.uuid4())
    language = resolve_language(
        req.language,
        request.cookies.get("polar.lang"),
        request.headers.get("accept-language"),
    )
    ai_mode = ai_service.get_status()["ai_mode"] if req.ai_mode is None else req.ai_mode

    history = history_service.get_messages(session_id)
    history_service.append_message(session_id, "user", message)

    ai_text = await ai_service.generate_response(message, history, language=language, ai_mode=ai_mode)
    history_service.append_message(session_id, "assistant", ai_text)

    logger.info(f"Text chat [{session_id[:8]}]: '{message[:50]}' -> '{ai_text[:50]}'")

    return TextChatResponse(
        session_id=session_id,
        user_message=message,
        ai_response=ai_text,
        topic=ai_service.detect_topic(message),
        language=language,
        ai_mode=ai_mode,
    )


@router.get("/{session_id}/history", response_model=List[ConversationMessage])
async def get_history(session_id: str):
    if not history_service.has_session(session_id):
        raise HTTPException(status_code=404, detail="Conversation not found")
    return history_service.get_messages(session_id)


@router.get("/{session_id}/export", response_model=ConversationExport)
async def export_conversation(session_id: str):
    if not history_service.has_session(session_id):
        raise HTTPException(status_code=404, detail="Conversation not found")
    return history_service.export_session(session_id)


@router.delete("/{session_id}")
async def reset_conversation(session_id: str):
    removed = history_service.reset_session(session_id)
    return {"status": "reset", "session_id": session_id, "messages_removed": removed}
