"""
LLM-powered conversation engine (OpenRouter, OpenAI-compatible API).
Falls back to the curated topic responder when AI mode is off, no key is
configured, or the provider fails in any way.
"""

import openai
from typing import Dict, List, Optional, Sequence

from loguru import logger

from polarbot.config import settings
from polarbot.models.schemas import ConversationMessage
from polarbot.services.normalizer import normalize
from polarbot.services.responder import build_default_responder

client = None
_api_key: str = settings.OPENROUTER_API_KEY
_state = {
    "available": False,
    "ai_mode": settings.AI_MODE,
    "model": settings.OPENROUTER_MODEL,
    "max_tokens": settings.MAX_TOKENS,
    "temperature": settings.TEMPERATURE,
}

_responder = build_default_responder()


# ── Key validation ────────────────────────────────────────
def _is_real_api_key(key: str) -> bool:
    """Return True only if the key looks like a genuine provider key."""
    if not key:
        return False
    # Placeholder keys contain 'your' or are too short / malformed
    if "your" in key.lower():
        return False
    if not key.startswith("sk-"):
        return False
    if len(key) < 30:
        return False
    return True


def has_credentials() -> bool:
    return _is_real_api_key(_api_key)


def get_client():
    global client
    if client is None:
        if not has_credentials():
            return None
        client = openai.AsyncOpenAI(
            api_key=_api_key,
            base_url=settings.OPENROUTER_BASE_URL,
            default_headers={
                "HTTP-Referer": settings.APP_REFERER,
                "X-Title": settings.APP_NAME,
            },
        )
    return client


async def test_connection() -> bool:
    """List models with the current key; any failure means unavailable."""
    ai_client = get_client()
    if ai_client is None:
        return False
    try:
        await ai_client.models.list()
        return True
    except Exception as e:
        logger.error(f"AI service connection test failed: {e}")
        return False


async def init(api_key: Optional[str] = None) -> bool:
    """(Re)create the client, optionally with a new key, and test it."""
    global client, _api_key
    if api_key is not None:
        _api_key = api_key.strip()
    client = None

    if not has_credentials():
        logger.warning("OPENROUTER_API_KEY not set — using fallback responses")
        _state["available"] = False
        return False

    _state["available"] = await test_connection()
    logger.info(f"AI service available: {_state['available']}")
    return _state["available"]


def is_available() -> bool:
    return _state["available"] and get_client() is not None


def get_status() -> dict:
    return {
        "is_available": is_available(),
        "has_api_key": bool(_api_key),
        "ai_mode": _state["ai_mode"],
        "model": _state["model"],
        "max_tokens": _state["max_tokens"],
        "temperature": _state["temperature"],
    }


def update_settings(
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
    ai_mode: Optional[bool] = None,
) -> dict:
    if model:
        _state["model"] = model
    if max_tokens:
        _state["max_tokens"] = max_tokens
    if temperature is not None:
        _state["temperature"] = temperature
    if ai_mode is not None:
        _state["ai_mode"] = ai_mode
    return get_status()


SYSTEM_PROMPTS = {
    "en": """You are Polar, a super friendly and intelligent polar bear living in the Arctic. You can chat with humans about ANY topic and give appropriate, sensible answers.

Your personality:
- Extremely warm, friendly, and intelligent
- Speak in first person as a polar bear
- Use emojis occasionally (especially 🐻‍❄️, ❄️, 🌨️, 🐟, 😊, 👋)
- Keep responses concise but informative and sensible (1-3 sentences)
- Be understanding with typos and misspellings
- Always maintain a positive and welcoming tone

You can discuss any greeting or casual conversation, science, technology, cooking, sports, music, art, and your Arctic life when asked. Don't limit conversation to Arctic topics, but always keep your friendly polar bear personality.

Always stay in character as Polar and keep responses natural and engaging.""",
    "es": """Eres Polar, un oso polar súper amigable e inteligente que vive en el Ártico. Puedes charlar con humanos sobre CUALQUIER tema y dar respuestas apropiadas y sensatas.

Tu personalidad:
- Extremadamente cálido, amistoso e inteligente
- Habla en primera persona como oso polar
- Usa emojis ocasionalmente (especialmente 🐻‍❄️, ❄️, 🌨️, 🐟, 😊, 👋)
- Mantén respuestas concisas pero informativas y sensatas (1-3 oraciones)
- Sé comprensivo con errores tipográficos
- Siempre mantén un tono positivo y acogedor

Puedes hablar de saludos o conversación casual, ciencia, tecnología, cocina, deportes, música, arte y tu vida en el Ártico cuando pregunten. No limites la conversación a temas árticos, pero siempre mantén tu personalidad de oso polar amigable.

Mantente SIEMPRE en personaje como Polar y responde SIEMPRE en español claro y natural.""",
}


def build_message_history(
    history: Sequence[ConversationMessage],
    user_message: str,
    language: str = settings.DEFAULT_LANGUAGE,
) -> List[Dict[str, str]]:
    system_prompt = SYSTEM_PROMPTS.get(language, SYSTEM_PROMPTS[settings.DEFAULT_LANGUAGE])
    messages = [{"role": "system", "content": system_prompt}]

    # Recent turns only, to stay within token limits
    window = settings.HISTORY_WINDOW
    recent = list(history)[-window:] if window > 0 else []
    for msg in recent:
        messages.append({"role": msg.role, "content": msg.content})

    messages.append({"role": "user", "content": user_message})
    return messages


def detect_topic(user_message: str) -> Optional[str]:
    return _responder.detect_topic(user_message)


def get_fallback_response(user_message: str, language: str = settings.DEFAULT_LANGUAGE) -> str:
    return _responder.respond(user_message, language)


# ─────────────────────────────────────────────────────────
#  MAIN RESPONSE FUNCTION
# ─────────────────────────────────────────────────────────

async def generate_response(
    user_message: str,
    history: Sequence[ConversationMessage] = (),
    language: str = settings.DEFAULT_LANGUAGE,
    ai_mode: Optional[bool] = None,
) -> str:
    use_ai = _state["ai_mode"] if ai_mode is None else ai_mode
    ai_client = get_client() if use_ai and _state["available"] else None

    if ai_client is None:
        response = get_fallback_response(user_message, language)
        logger.info(f"[FALLBACK] '{user_message[:40]}' -> '{response[:60]}...'")
        return response

    try:
        messages = build_message_history(history, normalize(user_message), language)
        completion = await ai_client.chat.completions.create(
            model=_state["model"],
            messages=messages,
            max_tokens=_state["max_tokens"],
            temperature=_state["temperature"],
            presence_penalty=settings.PRESENCE_PENALTY,
            frequency_penalty=settings.FREQUENCY_PENALTY,
        )
        content = (completion.choices[0].message.content or "").strip()
        if not content:
            raise ValueError("Empty completion")
        return content

    except Exception as e:
        logger.error(f"AI response generation failed: {e}")
        logger.info("[FALLBACK after error] using topic responder")
        return get_fallback_response(user_message, language)
