"""
Topic classifier: exact keyword pass, special-case pass, then a Levenshtein
fuzzy pass over an ordered keyword table.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from polarbot.config import settings

KeywordTable = Sequence[Tuple[str, Sequence[str]]]
SpecialCases = Sequence[Tuple[str, str]]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Compute Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    prev_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        curr_row = [i + 1]
        for j, c2 in enumerate(s2):
            cost = 0 if c1 == c2 else 1
            curr_row.append(min(
                curr_row[j] + 1,      # insert
                prev_row[j + 1] + 1,  # delete
                prev_row[j] + cost,   # replace
            ))
        prev_row = curr_row

    return prev_row[-1]


def similarity(s1: str, s2: str) -> float:
    """1 - distance / longest length; two empty strings are identical."""
    longest = max(len(s1), len(s2))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(s1, s2) / longest


class TopicClassifier:
    """
    Maps normalized text to at most one topic label.

    ``keyword_table`` is an ordered sequence of ``(topic, keywords)``; the
    declaration order is the priority order for every pass.
    """

    def __init__(
        self,
        keyword_table: KeywordTable,
        special_cases: SpecialCases = (),
        threshold: float = settings.FUZZY_THRESHOLD,
    ):
        table: List[Tuple[str, Tuple[str, ...]]] = []
        seen = set()
        for topic, keywords in keyword_table:
            if topic in seen:
                raise ValueError(f"Topic '{topic}' declared twice")
            seen.add(topic)
            table.append((topic, tuple(k.lower() for k in keywords if k)))

        self._table = table
        # sorted() is stable: equal-length keywords keep their declared order
        self._longest_first = [
            (topic, tuple(sorted(keywords, key=len, reverse=True)))
            for topic, keywords in table
        ]
        self._special_cases = [(phrase.lower(), topic) for phrase, topic in special_cases]
        self.threshold = threshold

    @property
    def topics(self) -> Tuple[str, ...]:
        return tuple(topic for topic, _ in self._table)

    def keywords(self, topic: str) -> Tuple[str, ...]:
        for name, keywords in self._table:
            if name == topic:
                return keywords
        raise KeyError(topic)

    def exact_match(self, text: str, topics: Optional[Iterable[str]] = None) -> Optional[str]:
        allowed = set(topics) if topics is not None else None
        for topic, keywords in self._longest_first:
            if allowed is not None and topic not in allowed:
                continue
            for keyword in keywords:
                if keyword in text:
                    return topic
        return None

    def special_case_match(self, text: str, topics: Optional[Iterable[str]] = None) -> Optional[str]:
        allowed = set(topics) if topics is not None else None
        for phrase, topic in self._special_cases:
            if allowed is not None and topic not in allowed:
                continue
            if phrase in text:
                return topic
        return None

    def fuzzy_match(self, text: str, topics: Optional[Iterable[str]] = None) -> Optional[str]:
        """
        Whole-input against whole-keyword similarity; first keyword reaching
        the threshold wins. Very short or very long inputs rarely qualify.
        """
        allowed = set(topics) if topics is not None else None
        text_len = len(text)
        for topic, keywords in self._table:
            if allowed is not None and topic not in allowed:
                continue
            for keyword in keywords:
                # The distance is at least the length gap, so similarity can
                # never exceed shorter / longer.
                shorter, longer = sorted((text_len, len(keyword)))
                if longer == 0 or shorter / longer < self.threshold:
                    continue
                if similarity(text, keyword) >= self.threshold:
                    return topic
        return None

    def classify(self, text: str, topics: Optional[Iterable[str]] = None) -> Optional[str]:
        if not isinstance(text, str) or not text.strip():
            return None
        if topics is not None:
            topics = tuple(topics)

        topic = self.exact_match(text, topics)
        if topic is None:
            topic = self.special_case_match(text, topics)
        if topic is None:
            topic = self.fuzzy_match(text, topics)

        logger.debug(f"Classified '{text[:40]}' -> {topic}")
        return topic
