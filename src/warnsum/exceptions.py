"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from warnsum._internal.exceptions import (
    InputError,
    InputNotFoundError,
    InputUnreadableError,
    WarnsumError,
    WarnsumValidationError,
)

__all__ = [
    "InputError",
    "InputNotFoundError",
    "InputUnreadableError",
    "WarnsumError",
    "WarnsumValidationError",
]
