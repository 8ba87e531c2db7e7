# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""warnsum - summarise compiler warnings.

Extracts GCC/Clang/gfortran warning lines from a build log and counts them by
warning flag, source file, directory and message keyword.
"""

from __future__ import annotations

__version__ = "0.1.0"

from warnsum._internal.exceptions import (  # noqa: E402
    InputError,
    InputNotFoundError,
    InputUnreadableError,
    WarnsumError,
    WarnsumValidationError,
)

from .aggregate import Aggregator, FrequencyTable, SummarySnapshot  # noqa: E402
from .api import summarise_file, summarise_lines, summarise_text  # noqa: E402
from .config import SummaryOptions, build_options  # noqa: E402
from .core.types import WarningRecord  # noqa: E402
from .keywords import DEFAULT_STOPWORDS, KeywordExtractor  # noqa: E402
from .matcher import find_warnings, iter_warnings, match_line  # noqa: E402
from .paths import decompose_path  # noqa: E402
from .report import render_report, render_table  # noqa: E402

__all__ = [
    "DEFAULT_STOPWORDS",
    "Aggregator",
    "FrequencyTable",
    "InputError",
    "InputNotFoundError",
    "InputUnreadableError",
    "KeywordExtractor",
    "SummaryOptions",
    "SummarySnapshot",
    "WarningRecord",
    "WarnsumError",
    "WarnsumValidationError",
    "__version__",
    "build_options",
    "decompose_path",
    "find_warnings",
    "iter_warnings",
    "match_line",
    "render_report",
    "render_table",
    "summarise_file",
    "summarise_lines",
    "summarise_text",
]
