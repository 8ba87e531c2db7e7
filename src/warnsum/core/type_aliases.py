# Copyright (c) 2024 PantherianCodeX

"""Typed aliases used across warnsum internals."""

from __future__ import annotations

from typing import NewType

FlagName = NewType("FlagName", str)
FileKey = NewType("FileKey", str)
DirectoryKey = NewType("DirectoryKey", str)
Keyword = NewType("Keyword", str)

__all__ = [
    "DirectoryKey",
    "FileKey",
    "FlagName",
    "Keyword",
]
