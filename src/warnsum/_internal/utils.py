# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Small shared helpers used across warnsum internals."""

from __future__ import annotations

from enum import Enum
from typing import cast

type JSONValue = str | int | float | bool | None | dict[str, JSONValue] | list[JSONValue]

__all__ = ["JSONValue", "consume", "normalise_enums_for_json"]


def consume(value: object | None) -> None:
    """Explicitly mark a value as intentionally unused."""
    _ = value


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads for JSON serialisation."""

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast(JSONValue, obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast(dict[object, object], obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                norm_key = str(key.value) if isinstance(key, Enum) else str(key)
                result[norm_key] = _convert(raw_val)
            return result
        if isinstance(obj, list | tuple):
            sequence = cast(list[object] | tuple[object, ...], obj)
            return [_convert(item) for item in sequence]
        if isinstance(obj, str | int | float | bool) or obj is None:
            return obj
        return str(obj)

    return _convert(value)
