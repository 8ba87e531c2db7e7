"""Public runtime helpers for warnsum layers above `_internal`."""

from __future__ import annotations

from warnsum._internal.utils import consume

__all__ = ["consume"]
