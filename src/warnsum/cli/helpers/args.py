# Copyright (c) 2024 PantherianCodeX
"""Argument parser helpers used by the CLI."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from typing import Any, Final, Protocol

from warnsum.runtime import consume

_WORD_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[\s,]+")


class ArgumentRegistrar(Protocol):
    def add_argument(
        self, *args: Any, **kwargs: Any
    ) -> argparse.Action: ...  # pragma: no cover - stub


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


def non_negative_int(raw: str) -> int:
    """``argparse`` type for counts where zero is meaningful."""
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative (got {value})")
    return value


def positive_int(raw: str) -> int:
    value = non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def parse_word_list(entries: Sequence[str] | None) -> list[str]:
    """Flatten ``--ignore`` values, splitting on whitespace and commas."""
    if not entries:
        return []
    words: list[str] = []
    for raw in entries:
        words.extend(part for part in _WORD_SEPARATORS.split(raw) if part)
    return words


__all__ = [
    "ArgumentRegistrar",
    "non_negative_int",
    "parse_word_list",
    "positive_int",
    "register_argument",
]
