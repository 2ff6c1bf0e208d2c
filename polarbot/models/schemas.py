"""
Pydantic request / response schemas for the API.
"""

from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ── Conversation ─────────────────────────────────────────
class ConversationMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=_now)

    class Config:
        frozen = True


class TextChatRequest(BaseModel):
    message: str = Field(max_length=4000)
    session_id: Optional[str] = None
    language: Optional[str] = None
    ai_mode: Optional[bool] = None


class TextChatResponse(BaseModel):
    session_id: str
    user_message: str
    ai_response: str
    topic: Optional[str] = None
    language: str
    ai_mode: bool


class ConversationExport(BaseModel):
    session_id: str
    exported_at: datetime
    message_count: int
    messages: List[ConversationMessage] = []


# ── Blueprint ────────────────────────────────────────────
class BlueprintRequest(BaseModel):
    messages: List[ConversationMessage] = []
    language: Optional[str] = None


class BlueprintResponse(BaseModel):
    session_id: Optional[str] = None
    language: str
    generated_at: datetime
    has_data: bool
    section_order: List[str]
    sections: Dict[str, List[str]]


# ── Settings ─────────────────────────────────────────────
class AISettingsUpdate(BaseModel):
    api_key: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0, le=4000)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    ai_mode: Optional[bool] = None


class AIStatus(BaseModel):
    is_available: bool
    has_api_key: bool
    ai_mode: bool
    model: str
    max_tokens: int
    temperature: float
