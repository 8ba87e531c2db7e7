# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for warnsum."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "InputError",
    "InputNotFoundError",
    "InputUnreadableError",
    "WarnsumError",
    "WarnsumValidationError",
]


class WarnsumError(Exception):
    """Base error for all warnsum exceptions."""


class WarnsumValidationError(WarnsumError, ValueError):
    """Raised when input data fails validation checks."""


class InputError(WarnsumError, OSError):
    """Raised when the log file cannot be used as input."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize the exception with the offending path and a short reason.

        Args:
            path: The log file that could not be read.
            reason: Human-readable description of the failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"could not read file `{path}`: {reason}")


class InputNotFoundError(InputError):
    """Raised when the log file does not exist."""


class InputUnreadableError(InputError):
    """Raised when the log file exists but cannot be read."""
