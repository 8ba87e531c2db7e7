# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import StrEnum
from typing import Final


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    CLI = "cli"
    API = "api"
    MATCHER = "matcher"


class TotalPolicy(StrEnum):
    """How the ``Total`` row of a report section is computed."""

    SUM = "sum"
    DISTINCT = "distinct"


class ReportSection(StrEnum):
    WARNINGS = "Warnings"
    FILES = "Files"
    DIRECTORIES = "Directories"
    KEYWORDS = "Keywords"

    @property
    def total_policy(self) -> TotalPolicy:
        # Only the warnings table sums its counts; the others count distinct keys.
        if self is ReportSection.WARNINGS:
            return TotalPolicy.SUM
        return TotalPolicy.DISTINCT


REPORT_SECTION_ORDER: Final[tuple[ReportSection, ...]] = (
    ReportSection.WARNINGS,
    ReportSection.FILES,
    ReportSection.DIRECTORIES,
    ReportSection.KEYWORDS,
)

__all__ = [
    "REPORT_SECTION_ORDER",
    "LogComponent",
    "LogFormat",
    "ReportSection",
    "TotalPolicy",
]
