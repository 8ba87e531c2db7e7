# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""High-level entry points that run the extract, count and snapshot pipeline."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from warnsum._internal.logging_utils import structured_extra
from warnsum.aggregate import Aggregator, SummarySnapshot
from warnsum.config import SummaryOptions
from warnsum.core.model_types import LogComponent
from warnsum.exceptions import InputNotFoundError, InputUnreadableError
from warnsum.matcher import iter_warnings

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger("warnsum.api")


def summarise_lines(
    lines: Iterable[str],
    options: SummaryOptions | None = None,
) -> SummarySnapshot:
    """Aggregate every warning found in ``lines``."""
    selected = options or SummaryOptions()
    aggregator = Aggregator(selected.keyword_extractor())
    for record in iter_warnings(lines):
        aggregator.record(record)
    return aggregator.snapshot()


def summarise_text(content: str, options: SummaryOptions | None = None) -> SummarySnapshot:
    """Aggregate every warning found in a block of log text."""
    return summarise_lines(content.splitlines(), options)


def summarise_file(path: Path, options: SummaryOptions | None = None) -> SummarySnapshot:
    """Stream ``path`` once and aggregate the warnings it contains.

    Raises:
        InputNotFoundError: If ``path`` does not exist.
        InputUnreadableError: If ``path`` exists but cannot be opened or read.
    """
    start = time.perf_counter()
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            snapshot = summarise_lines(handle, options)
    except FileNotFoundError as exc:
        raise InputNotFoundError(path, exc.strerror or "no such file") from exc
    except OSError as exc:
        raise InputUnreadableError(path, exc.strerror or str(exc)) from exc
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Summarised %s warning(s) from %s",
        snapshot.total,
        path,
        extra=structured_extra(
            component=LogComponent.API,
            path=str(path),
            counts={
                "warnings": snapshot.total,
                "files": snapshot.files.distinct(),
                "directories": snapshot.directories.distinct(),
                "keywords": snapshot.keywords.distinct(),
            },
            duration_ms=round(duration_ms, 3),
        ),
    )
    return snapshot


__all__ = ["summarise_file", "summarise_lines", "summarise_text"]
