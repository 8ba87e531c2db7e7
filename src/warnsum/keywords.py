# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Keyword extraction for warning messages.

Messages are lower-cased, stripped of punctuation and split on whitespace.
Tokens shorter than the configured minimum length, purely numeric tokens and
stopwords are discarded. Every surviving occurrence is reported, so a word
repeated within one message counts twice.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from warnsum.core.type_aliases import Keyword

DEFAULT_MIN_KEYWORD_LENGTH: Final[int] = 5

# Filler words long enough to survive the default length threshold.
DEFAULT_STOPWORDS: Final[frozenset[str]] = frozenset(
    {
        "about",
        "after",
        "again",
        "before",
        "being",
        "could",
        "doing",
        "every",
        "might",
        "other",
        "should",
        "their",
        "there",
        "these",
        "thing",
        "things",
        "those",
        "where",
        "which",
        "while",
        "would",
    },
)

_APOSTROPHES: Final[re.Pattern[str]] = re.compile(r"['‘’`]")
_PUNCTUATION: Final[re.Pattern[str]] = re.compile(r"[^\w\s]")


def normalise_token(token: str) -> str:
    """Lower-case ``token`` and drop punctuation (``Don't`` becomes ``dont``)."""
    without_quotes = _APOSTROPHES.sub("", token.lower())
    return _PUNCTUATION.sub(" ", without_quotes).strip()


class KeywordExtractor:
    """Turn warning messages into keyword occurrences."""

    __slots__ = ("_min_length", "_stopwords")

    def __init__(
        self,
        *,
        min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
        ignore: Iterable[str] = (),
    ) -> None:
        super().__init__()
        if min_length < 1:
            raise ValueError(f"min_length must be positive (got {min_length})")
        self._min_length = min_length
        extra = {part for word in ignore for part in normalise_token(word).split()}
        self._stopwords: frozenset[str] = DEFAULT_STOPWORDS | extra

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def stopwords(self) -> frozenset[str]:
        return self._stopwords

    def is_keyword(self, token: str) -> bool:
        return (
            len(token) >= self._min_length
            and not token.isdigit()
            and token not in self._stopwords
        )

    def extract(self, message: str) -> list[Keyword]:
        keywords: list[Keyword] = []
        for raw in message.split():
            # Punctuation inside a word (``foo.bar``) splits it into several tokens.
            for token in normalise_token(raw).split():
                if self.is_keyword(token):
                    keywords.append(Keyword(token))
        return keywords


__all__ = [
    "DEFAULT_MIN_KEYWORD_LENGTH",
    "DEFAULT_STOPWORDS",
    "KeywordExtractor",
    "normalise_token",
]
