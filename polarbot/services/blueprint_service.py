"""
Conversation blueprint — buckets the assistant's own sentences into the
seven knowledge sections.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from polarbot.config import settings
from polarbot.services.classifier import TopicClassifier
from polarbot.services.lexicon import BLUEPRINT_KEYWORDS, BLUEPRINT_SECTION_ORDER

_WHITESPACE = re.compile(r"\s+")
# A run of text up to its terminal punctuation, or a trailing unterminated fragment
_SENTENCE = re.compile(r"[^.!?]+[.!?]+|[^.!?]+$")

ASSISTANT_ROLES = ("assistant", "bot")


def _field(message: Any, name: str) -> Any:
    if isinstance(message, dict):
        return message.get(name)
    return getattr(message, name, None)


class BlueprintGenerator:
    def __init__(
        self,
        classifier: Optional[TopicClassifier] = None,
        sections: Sequence[str] = BLUEPRINT_SECTION_ORDER,
        max_items: int = settings.BLUEPRINT_MAX_ITEMS,
    ):
        self.classifier = classifier or TopicClassifier(BLUEPRINT_KEYWORDS)
        self.sections = tuple(sections)
        self.max_items = max_items

    @staticmethod
    def split_into_sentences(text: str) -> List[str]:
        normalized = _WHITESPACE.sub(" ", text or "").strip()
        if not normalized:
            return []
        matches = [s.strip() for s in _SENTENCE.findall(normalized)]
        matches = [s for s in matches if s]
        # Punctuation-only text still counts as one sentence
        return matches or [normalized]

    def detect_section(self, sentence: str) -> Optional[str]:
        return self.classifier.classify(sentence.lower(), topics=self.sections)

    def empty_sections(self) -> Dict[str, List[str]]:
        return {key: [] for key in self.sections}

    def build_sections(self, messages: Iterable[Any]) -> Dict[str, List[str]]:
        """
        Walk assistant messages in order and keep up to ``max_items``
        distinct sentences per section. Sections with no match stay empty.
        """
        sections = self.empty_sections()

        for msg in messages:
            if msg is None or _field(msg, "role") not in ASSISTANT_ROLES:
                continue
            for sentence in self.split_into_sentences(_field(msg, "content") or ""):
                section = self.detect_section(sentence)
                if section not in sections:
                    continue
                items = sections[section]
                if len(items) < self.max_items and sentence not in items:
                    items.append(sentence)

        return sections


def count_items(sections: Dict[str, List[str]]) -> int:
    return sum(len(items or []) for items in sections.values())
