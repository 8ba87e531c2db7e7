# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common Hypothesis strategies."""

from __future__ import annotations

from .common import flag_names, log_blocks, messages, noise_lines, source_paths, warning_blocks

__all__ = [
    "flag_names",
    "log_blocks",
    "messages",
    "noise_lines",
    "source_paths",
    "warning_blocks",
]
