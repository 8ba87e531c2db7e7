# Copyright (c) 2024 PantherianCodeX
"""Shared helpers for the warnsum CLI."""

from __future__ import annotations

from .args import (
    ArgumentRegistrar,
    non_negative_int,
    parse_word_list,
    positive_int,
    register_argument,
)
from .io import echo

__all__ = [
    "ArgumentRegistrar",
    "echo",
    "non_negative_int",
    "parse_word_list",
    "positive_int",
    "register_argument",
]
