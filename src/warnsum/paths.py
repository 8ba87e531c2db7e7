# Copyright (c) 2024 PantherianCodeX

"""Derive aggregation keys from a diagnostic's source path."""

from __future__ import annotations

from typing import Final

from warnsum.core.type_aliases import DirectoryKey, FileKey

ROOT_DIRECTORY: Final[DirectoryKey] = DirectoryKey(".")
_SEPARATORS: Final[tuple[str, ...]] = ("/", "\\")


def decompose_path(file_path: str) -> tuple[DirectoryKey, FileKey]:
    """Split ``file_path`` into ``(directory_key, file_key)``.

    The file key is the path exactly as it appeared in the log. The directory
    key drops the final segment; bare file names fall back to ``.`` and files
    directly under the filesystem root map to ``/``.
    """
    cut = max(file_path.rfind(sep) for sep in _SEPARATORS)
    if cut < 0:
        return ROOT_DIRECTORY, FileKey(file_path)
    if cut == 0:
        return DirectoryKey(file_path[0]), FileKey(file_path)
    return DirectoryKey(file_path[:cut]), FileKey(file_path)


__all__ = ["ROOT_DIRECTORY", "decompose_path"]
