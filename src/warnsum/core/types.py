# Copyright (c) 2024 PantherianCodeX

from __future__ import annotations

from dataclasses import dataclass

from .type_aliases import FlagName


@dataclass(frozen=True, slots=True)
class WarningRecord:
    """One compiler warning extracted from a log line."""

    file_path: str
    line: int
    column: int
    message: str
    flag_name: FlagName


__all__ = ["WarningRecord"]
