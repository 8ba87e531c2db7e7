# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Logging utilities exposed for CLI usage."""

from __future__ import annotations

from warnsum._internal.logging_utils import (
    LOG_FORMATS,
    LOG_LEVELS,
    StructuredLogExtra,
    configure_logging,
    structured_extra,
)

__all__ = ["LOG_FORMATS", "LOG_LEVELS", "StructuredLogExtra", "configure_logging", "structured_extra"]
