"""
Best-effort translation of blueprint sections, with an in-memory LRU cache.

Translation is an optional enhancement: every failure returns the original
sections untouched.
"""

import json
import re
from collections import OrderedDict
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from loguru import logger

from polarbot.config import settings
from polarbot.services import ai_service
from polarbot.services.blueprint_service import count_items

Sections = Dict[str, List[str]]
Translator = Callable[[Sections, str], Awaitable[Any]]

LANGUAGE_NAMES = {"en": "English", "es": "Spanish"}

_JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


class SectionLocalizer:
    def __init__(
        self,
        translator: Optional[Translator] = None,
        supported_languages: Sequence[str] = settings.supported_languages,
        cache_size: int = settings.TRANSLATION_CACHE_SIZE,
    ):
        self.translator = translator
        self.supported_languages = tuple(lang.lower() for lang in supported_languages)
        self.cache_size = cache_size
        self._cache: "OrderedDict[str, Sections]" = OrderedDict()

    @staticmethod
    def cache_key(sections: Sections, language: str) -> str:
        return json.dumps(sections, sort_keys=True, ensure_ascii=False) + "::" + language

    def cache_get(self, key: str) -> Optional[Sections]:
        if key not in self._cache:
            return None
        self._cache.move_to_end(key)
        return {k: list(v) for k, v in self._cache[key].items()}

    def cache_put(self, key: str, value: Sections) -> None:
        if self.cache_size <= 0:
            return
        self._cache[key] = value
        self._cache.move_to_end(key)
        while len(self._cache) > self.cache_size:
            self._cache.popitem(last=False)

    def __len__(self) -> int:
        return len(self._cache)

    @staticmethod
    def validate(source: Sections, translated: Any) -> Sections:
        """
        Same keys, same item counts, every item a string. Any deviation
        rejects the whole translation.
        """
        if not isinstance(translated, dict):
            raise ValueError(f"Expected an object, got {type(translated).__name__}")
        result: Sections = {}
        for key, items in source.items():
            out = translated.get(key)
            if not isinstance(out, list):
                raise ValueError(f"Section '{key}' missing or not a list")
            if len(out) != len(items or []):
                raise ValueError(f"Section '{key}' has {len(out)} items, expected {len(items or [])}")
            result[key] = [str(item) for item in out]
        return result

    async def localize(self, sections: Sections, target_language: Optional[str]) -> Sections:
        if not sections or count_items(sections) == 0:
            return sections

        lang = (target_language or settings.DEFAULT_LANGUAGE).lower()
        if lang not in self.supported_languages:
            return sections

        key = self.cache_key(sections, lang)
        cached = self.cache_get(key)
        if cached is not None:
            logger.debug(f"Translation cache hit ({lang})")
            return cached

        if self.translator is None:
            return sections

        try:
            translated = await self.translator(sections, lang)
            result = self.validate(sections, translated)
        except Exception as e:
            logger.error(f"Section translation to '{lang}' failed: {e}")
            return sections

        self.cache_put(key, result)
        return {k: list(v) for k, v in result.items()}


# ─────────────────────────────────────────────────────────
#  PROVIDER TRANSLATOR
# ─────────────────────────────────────────────────────────

def _extract_json(content: str) -> Any:
    match = _JSON_BLOCK.search(content or "")
    parsed = json.loads(match.group(0) if match else content)
    if isinstance(parsed, dict) and isinstance(parsed.get("sections"), dict):
        return parsed["sections"]
    return parsed


async def translate_sections(sections: Sections, language: str) -> Any:
    """Ask the chat model for a JSON translation of the section strings."""
    ai_client = ai_service.get_client()
    if ai_client is None:
        raise RuntimeError("Translation provider not configured")

    target = LANGUAGE_NAMES.get(language, language)
    system = (
        f"You are a precise translation engine. Translate ONLY the string values in the "
        f"provided JSON to {target}. Keep emojis and punctuation. Preserve array lengths "
        f"and keys. Return VALID JSON, no commentary."
    )
    user = json.dumps({"targetLang": target, "sections": sections}, ensure_ascii=False)

    completion = await ai_client.chat.completions.create(
        model=ai_service.get_status()["model"],
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        max_tokens=settings.TRANSLATION_MAX_TOKENS,
        temperature=settings.TRANSLATION_TEMPERATURE,
    )
    return _extract_json(completion.choices[0].message.content or "")


_localizer: Optional[SectionLocalizer] = None


def get_localizer() -> SectionLocalizer:
    """Shared localizer; translation is only wired in when a key is configured."""
    global _localizer
    if _localizer is None:
        translator = translate_sections if ai_service.has_credentials() else None
        _localizer = SectionLocalizer(translator=translator)
    return _localizer


def reset_localizer() -> None:
    global _localizer
    _localizer = None
