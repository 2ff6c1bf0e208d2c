"""
Input normalization: lower-casing plus whole-word typo / abbreviation fixes.
"""

import re
from typing import Dict, Mapping, Optional

from polarbot.services.lexicon import CORRECTIONS


class Normalizer:
    """
    Rewrites known typos and chat shorthand to their canonical words.

    All corrections run in a single regex pass, so the outcome never depends
    on the order of the table. A table whose canonical forms are themselves
    triggers is rejected, which also makes ``normalize`` idempotent.
    """

    def __init__(self, corrections: Mapping[str, str] = CORRECTIONS):
        table: Dict[str, str] = {}
        for typo, canonical in corrections.items():
            typo, canonical = typo.lower(), canonical.lower()
            if typo == canonical:
                raise ValueError(f"Correction '{typo}' maps to itself")
            table[typo] = canonical

        for typo, canonical in table.items():
            chained = [word for word in canonical.split() if word in table]
            if chained:
                raise ValueError(
                    f"Correction '{typo}' -> '{canonical}' produces trigger(s) {chained}"
                )

        self._table = table
        self._pattern: Optional[re.Pattern] = None
        if table:
            # Longest first so a trigger never shadows a longer one sharing its prefix
            alternation = "|".join(re.escape(t) for t in sorted(table, key=len, reverse=True))
            self._pattern = re.compile(r"\b(?:" + alternation + r")\b")

    @property
    def corrections(self) -> Dict[str, str]:
        return dict(self._table)

    def normalize(self, text: str) -> str:
        if not isinstance(text, str):
            return ""
        lowered = text.lower()
        if self._pattern is None:
            return lowered
        return self._pattern.sub(lambda m: self._table[m.group(0)], lowered)


_default = Normalizer()


def normalize(text: str) -> str:
    """Normalize with the built-in correction table."""
    return _default.normalize(text)
