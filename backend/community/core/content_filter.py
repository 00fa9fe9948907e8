"""Content gate - rejects text containing prohibited words."""

from collections.abc import Iterable

import regex

from community.core.config import settings


class ProfanityFilter:
    """Whole-word, case-insensitive match against a configured word list."""

    def __init__(self, words: Iterable[str]):
        cleaned = [w.strip() for w in words if w and w.strip()]
        self._pattern = None
        if cleaned:
            alternatives = "|".join(regex.escape(w) for w in cleaned)
            self._pattern = regex.compile(
                rf"(?<!\p{{L}})(?:{alternatives})(?!\p{{L}})",
                regex.UNICODE | regex.IGNORECASE,
            )

    def contains_prohibited_content(self, text: str | None) -> bool:
        if not text or self._pattern is None:
            return False
        return self._pattern.search(text) is not None


def get_content_filter() -> ProfanityFilter:
    return ProfanityFilter(settings.PROHIBITED_WORDS)
