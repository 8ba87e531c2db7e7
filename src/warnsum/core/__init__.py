# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core type definitions and data structures for warnsum.

- Model types: Enums for log formats, components, report sections and totals
- Type aliases: NewType keys used by the frequency tables
- Core types: the immutable ``WarningRecord`` produced by the matcher
"""

from __future__ import annotations

from . import model_types, type_aliases, types

__all__ = [
    "model_types",
    "type_aliases",
    "types",
]
