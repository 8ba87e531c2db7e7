# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Run options for warnsum.

Options only come from the command line or from API callers; there is no
configuration file. The pydantic model validates and normalises the values
before they reach the pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from warnsum.exceptions import WarnsumValidationError
from warnsum.keywords import DEFAULT_MIN_KEYWORD_LENGTH, KeywordExtractor, normalise_token

DEFAULT_TOP_N: Final[int] = 10


class OptionsValidationError(WarnsumValidationError):
    """Raised when run options contain invalid values."""

    def __init__(self, error: Exception) -> None:
        """Initialize the exception with the underlying validation error.

        Args:
            error: The pydantic validation error describing the bad values.
        """
        self.error = error
        super().__init__(f"Invalid warnsum options: {error}")


class SummaryOptions(BaseModel):
    """Validated knobs for a single summarising run.

    Attributes:
        top_n: Rows shown per report section; ``0`` shows every row.
        keyword_length: Minimum length of a token to count as a keyword.
        ignore: Extra words excluded from the keyword table, on top of the
            built-in stopwords.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    top_n: int = Field(default=DEFAULT_TOP_N, ge=0)
    keyword_length: int = Field(default=DEFAULT_MIN_KEYWORD_LENGTH, ge=1)
    ignore: tuple[str, ...] = ()

    @field_validator("ignore", mode="before")
    @classmethod
    def _split_ignore(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(value.split())
        return value

    @field_validator("ignore")
    @classmethod
    def _normalise_ignore(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: list[str] = []
        for raw in value:
            for token in normalise_token(raw).split():
                if token not in seen:
                    seen.append(token)
        return tuple(seen)

    def keyword_extractor(self) -> KeywordExtractor:
        return KeywordExtractor(min_length=self.keyword_length, ignore=self.ignore)


def build_options(
    *,
    top_n: int = DEFAULT_TOP_N,
    keyword_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
    ignore: Iterable[str] | str = (),
) -> SummaryOptions:
    """Validate raw option values, raising ``OptionsValidationError`` on failure."""
    raw_ignore = ignore if isinstance(ignore, str) else tuple(ignore)
    try:
        return SummaryOptions.model_validate(
            {"top_n": top_n, "keyword_length": keyword_length, "ignore": raw_ignore},
        )
    except ValidationError as exc:
        raise OptionsValidationError(exc) from exc


__all__ = [
    "DEFAULT_TOP_N",
    "OptionsValidationError",
    "SummaryOptions",
    "build_options",
]
