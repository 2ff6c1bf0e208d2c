"""
Fallback responder — picks a curated reply for the detected topic.
"""

import random
from typing import Mapping, Optional, Sequence

from polarbot.config import settings
from polarbot.services.classifier import TopicClassifier
from polarbot.services.lexicon import SPECIAL_CASES, TOPIC_KEYWORDS
from polarbot.services.normalizer import Normalizer
from polarbot.services.responses import GENERAL_RESPONSES, TOPIC_RESPONSES


class ResponsePool:
    """Replies per language and topic, plus a general pool per language."""

    def __init__(
        self,
        topics: Mapping[str, Mapping[str, Sequence[str]]],
        general: Mapping[str, Sequence[str]],
    ):
        if not general:
            raise ValueError("At least one general pool is required")
        for lang, replies in general.items():
            if not replies:
                raise ValueError(f"Empty general pool for '{lang}'")
        for lang, pools in topics.items():
            for topic, replies in pools.items():
                if not replies:
                    raise ValueError(f"Empty response pool for ({topic}, {lang})")

        self.topics = {lang: {t: list(r) for t, r in pools.items()} for lang, pools in topics.items()}
        self.general = {lang: list(r) for lang, r in general.items()}

    def candidates(self, topic: Optional[str], language: str) -> Sequence[str]:
        if topic is not None:
            replies = self.topics.get(language, {}).get(topic)
            if replies:
                return replies
        return self.general[language]


class FallbackResponder:
    """
    Normalize → classify → choose uniformly at random from the matching pool.

    ``rng`` only needs a ``choice`` method; pass ``random.Random(seed)`` for
    reproducible picks.
    """

    def __init__(
        self,
        classifier: TopicClassifier,
        pool: ResponsePool,
        normalizer: Optional[Normalizer] = None,
        rng: Optional[random.Random] = None,
        default_language: str = settings.DEFAULT_LANGUAGE,
    ):
        if default_language not in pool.general:
            raise ValueError(f"No general pool for default language '{default_language}'")
        self.classifier = classifier
        self.pool = pool
        self.normalizer = normalizer or Normalizer()
        self.rng = rng or random.Random()
        self.default_language = default_language

    def detect_topic(self, user_text: str) -> Optional[str]:
        return self.classifier.classify(self.normalizer.normalize(user_text))

    def respond(self, user_text: str, language: str = settings.DEFAULT_LANGUAGE) -> str:
        if language not in self.pool.general:
            language = self.default_language
        topic = self.detect_topic(user_text)
        return self.rng.choice(self.pool.candidates(topic, language))


def build_default_responder(rng: Optional[random.Random] = None) -> FallbackResponder:
    return FallbackResponder(
        classifier=TopicClassifier(TOPIC_KEYWORDS, SPECIAL_CASES),
        pool=ResponsePool(TOPIC_RESPONSES, GENERAL_RESPONSES),
        rng=rng,
    )
