# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Final, Literal, TypedDict, cast, override

from warnsum._internal.utils import normalise_enums_for_json
from warnsum.core.model_types import LogComponent, LogFormat

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    tuple[Literal["text", "json"], ...],
    tuple(format_.value for format_ in LogFormat),
)
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = (
    "debug",
    "info",
    "warning",
    "error",
)
_STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "path",
    "counts",
    "lines",
    "duration_ms",
    "exit_code",
)
_CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "warnsum.cli",
    "warnsum.api",
    "warnsum.matcher",
)


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in _STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalise_enums_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter for CLI output."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _coerce_log_format(log_format: LogFormat | str) -> LogFormat:
    if isinstance(log_format, LogFormat):
        return log_format
    return LogFormat.from_str(log_format)


def _coerce_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = str(level).strip().lower()
    match value:
        case "debug":
            return logging.DEBUG
        case "info":
            return logging.INFO
        case "error":
            return logging.ERROR
        case _:
            return logging.WARNING


def configure_logging(log_format: LogFormat | str, *, log_level: str | int = "warning") -> None:
    """Configure warnsum logging according to the requested format."""

    selected_format = _coerce_log_format(log_format)
    level = _coerce_log_level(log_level)
    handler = logging.StreamHandler()
    if selected_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(TextLogFormatter())

    root_logger = logging.getLogger("warnsum")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    # Ensure child loggers inherit the configured handler/level.
    for child in _CHILD_LOGGERS:
        logging.getLogger(child).setLevel(level)


class StructuredLogExtra(TypedDict, total=False):
    component: LogComponent
    path: str
    counts: dict[str, int]
    lines: int
    duration_ms: float
    exit_code: int


def structured_extra(
    *,
    component: LogComponent,
    path: str | None = None,
    counts: dict[str, int] | None = None,
    lines: int | None = None,
    duration_ms: float | None = None,
    exit_code: int | None = None,
) -> StructuredLogExtra:
    """Build the ``extra`` mapping understood by ``JSONLogFormatter``."""
    extra: StructuredLogExtra = {"component": component}
    if path is not None:
        extra["path"] = path
    if counts is not None:
        extra["counts"] = counts
    if lines is not None:
        extra["lines"] = lines
    if duration_ms is not None:
        extra["duration_ms"] = duration_ms
    if exit_code is not None:
        extra["exit_code"] = exit_code
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "JSONLogFormatter",
    "StructuredLogExtra",
    "TextLogFormatter",
    "configure_logging",
    "structured_extra",
]
