"""
Display-language resolution from request hints.
"""

import re
from typing import Optional

from polarbot.config import settings

_PRIMARY_TAG = re.compile(r"[a-zA-Z]{2,3}")


def supported_languages() -> tuple:
    return settings.supported_languages


def primary_language(value: Optional[str]) -> Optional[str]:
    """
    First primary subtag of a language hint: ``es-MX`` -> ``es``,
    ``en-US,en;q=0.9`` -> ``en``.
    """
    if not value or not isinstance(value, str):
        return None
    match = _PRIMARY_TAG.match(value.strip())
    return match.group(0).lower() if match else None


def resolve_language(*candidates: Optional[str]) -> str:
    """Return the first supported candidate, else the default language."""
    supported = supported_languages()
    for candidate in candidates:
        lang = primary_language(candidate)
        if lang in supported:
            return lang
    return settings.DEFAULT_LANGUAGE
