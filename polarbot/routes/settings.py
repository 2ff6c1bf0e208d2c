"""
AI settings endpoints.
"""

from fastapi import APIRouter, HTTPException

from polarbot.models.schemas import AISettingsUpdate, AIStatus
from polarbot.services import ai_service
from polarbot.services.translation_service import reset_localizer

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("/ai", response_model=AIStatus)
async def get_ai_settings():
    return ai_service.get_status()


@router.put("/ai", response_model=AIStatus)
async def update_ai_settings(update: AISettingsUpdate):
    if update.api_key is not None:
        if not await ai_service.init(update.api_key):
            raise HTTPException(status_code=400, detail="Invalid API key. Please check your OpenRouter API key.")
        reset_localizer()

    return ai_service.update_settings(
        model=update.model,
        max_tokens=update.max_tokens,
        temperature=update.temperature,
        ai_mode=update.ai_mode,
    )
