# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from tests.fixtures.logs import gcc_log_path, readme_log_path  # noqa: E402

__all__ = ["gcc_log_path", "readme_log_path"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture(autouse=True)
def _reset_warnsum_logging() -> Iterator[None]:
    """Undo ``configure_logging`` so caplog sees records in every test."""
    yield
    logger = logging.getLogger("warnsum")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    for child in ("warnsum.cli", "warnsum.api", "warnsum.matcher"):
        logging.getLogger(child).setLevel(logging.NOTSET)
