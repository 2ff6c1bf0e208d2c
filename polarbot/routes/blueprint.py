"""
Conversation blueprint endpoints.
"""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Request
from loguru import logger

from polarbot.models.schemas import BlueprintRequest, BlueprintResponse
from polarbot.services import history_service
from polarbot.services.blueprint_service import BlueprintGenerator, count_items
from polarbot.services.language_service import resolve_language
from polarbot.services.translation_service import get_localizer

router = APIRouter(prefix="/api/blueprint", tags=["blueprint"])

_generator = BlueprintGenerator()


async def _render(messages: List, language: str, session_id: Optional[str] = None) -> BlueprintResponse:
    sections = _generator.build_sections(messages)
    localized = await get_localizer().localize(sections, language)
    total = count_items(localized)
    logger.info(f"Blueprint [{(session_id or 'adhoc')[:8]}] {total} items ({language})")
    return BlueprintResponse(
        session_id=session_id,
        language=language,
        generated_at=datetime.now(timezone.utc),
        has_data=total > 0,
        section_order=list(_generator.sections),
        sections=localized,
    )


@router.get("/{session_id}", response_model=BlueprintResponse)
async def session_blueprint(session_id: str, request: Request, lang: Optional[str] = None):
    language = resolve_language(
        lang,
        request.cookies.get("polar.lang"),
        request.headers.get("accept-language"),
    )
    return await _render(history_service.get_messages(session_id), language, session_id)


@router.post("/extract", response_model=BlueprintResponse)
async def extract_blueprint(req: BlueprintRequest, request: Request):
    language = resolve_language(req.language, request.headers.get("accept-language"))
    return await _render(req.messages, language)
