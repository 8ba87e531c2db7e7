# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import json
import logging

import pytest
from pytest import CaptureFixture

from warnsum._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from warnsum.core.model_types import LogComponent, LogFormat


def test_configure_logging_json_emits_structured_logs(capsys: CaptureFixture[str]) -> None:
    configure_logging("json", log_level="info")
    logger = logging.getLogger("warnsum")
    logger.info(
        "hello",
        extra=structured_extra(
            component=LogComponent.API,
            path="build.log",
            counts={"warnings": 4},
            duration_ms=1.2,
        ),
    )
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    lines = [line for line in captured.err.strip().splitlines() if line]
    payload = json.loads(lines[-2])
    assert payload["message"] == "hello"
    assert payload["level"] == "info"
    assert payload["logger"] == "warnsum"
    assert payload["component"] == "api"
    assert payload["path"] == "build.log"
    assert payload["counts"] == {"warnings": 4}
    assert payload["duration_ms"] == 1.2
    assert "exit_code" not in payload

    exception_payload = json.loads(lines[-1])
    assert exception_payload["message"] == "broken"
    assert "exc_info" in exception_payload


def test_configure_logging_text_format(capsys: CaptureFixture[str]) -> None:
    configure_logging(LogFormat.TEXT, log_level="debug")
    logging.getLogger("warnsum.matcher").debug("scanning")

    assert "[DEBUG] scanning" in capsys.readouterr().err


def test_configure_logging_respects_level(capsys: CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    configure_logging("text", log_level="warning")
    logger = logging.getLogger("warnsum")
    logger.info("ignored")
    logger.warning("recorded")
    captured = capsys.readouterr()
    combined = captured.out + captured.err
    assert "ignored" not in combined
    assert "recorded" in combined


def test_configure_logging_defaults_to_warning() -> None:
    configure_logging("text")

    assert logging.getLogger("warnsum").level == logging.WARNING
    assert logging.getLogger("warnsum.cli").level == logging.WARNING


def test_log_formats_and_unknown_format() -> None:
    assert LOG_FORMATS == ("text", "json")
    with pytest.raises(ValueError, match="Unknown log format"):
        configure_logging("xml")


def test_structured_extra_only_includes_provided_fields() -> None:
    assert structured_extra(component=LogComponent.CLI, exit_code=1) == {
        "component": LogComponent.CLI,
        "exit_code": 1,
    }
