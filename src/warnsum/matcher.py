# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Recognise GCC/Clang/gfortran warning lines in a build log.

Only single-line diagnostics of the shape::

    <path>:<line>:<col>: warning: <message> [-W<flag>]

are recognised. Context lines (``In function 'f':``), source excerpts, caret
markup and diagnostics of any other severity are ignored.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from warnsum._internal.logging_utils import structured_extra
from warnsum.core.model_types import LogComponent
from warnsum.core.type_aliases import FlagName
from warnsum.core.types import WarningRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger("warnsum.matcher")

UNKNOWN_FLAG: Final[FlagName] = FlagName("unknown")

_WARNING_LINE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<path>.+?):(?P<line>\d+):(?P<column>\d+):\s*warning:\s*(?P<message>.*?)"
    r"(?:\s*\[-W(?P<flag>[^\]\s]+)\])?$"
)
_ANCHOR: Final[str] = "warning:"


def match_line(line: str) -> WarningRecord | None:
    """Parse ``line`` into a ``WarningRecord`` or return ``None``.

    Lines without a trailing ``[-W<flag>]`` bracket are recorded under the
    ``unknown`` flag.
    """
    text = line.strip()
    if _ANCHOR not in text:
        return None
    match = _WARNING_LINE.match(text)
    if match is None:
        return None
    flag = match.group("flag")
    return WarningRecord(
        file_path=match.group("path"),
        line=int(match.group("line")),
        column=int(match.group("column")),
        message=match.group("message").strip(),
        flag_name=FlagName(flag) if flag else UNKNOWN_FLAG,
    )


def iter_warnings(lines: Iterable[str]) -> Iterator[WarningRecord]:
    """Yield a record for every warning line in ``lines``, in order."""
    scanned = 0
    matched = 0
    for line in lines:
        scanned += 1
        record = match_line(line)
        if record is None:
            continue
        matched += 1
        yield record
    logger.debug(
        "Matched %s warning(s) in %s line(s)",
        matched,
        scanned,
        extra=structured_extra(
            component=LogComponent.MATCHER,
            lines=scanned,
            counts={"warnings": matched},
        ),
    )


def find_warnings(content: str) -> list[WarningRecord]:
    """Return every warning found in a block of log text."""
    return list(iter_warnings(content.splitlines()))


__all__ = ["UNKNOWN_FLAG", "find_warnings", "iter_warnings", "match_line"]
