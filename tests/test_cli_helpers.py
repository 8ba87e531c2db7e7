# Copyright (c) 2024 PantherianCodeX

"""Unit tests for CLI helper utilities."""

from __future__ import annotations

import argparse

import pytest

from warnsum.cli.helpers import echo, non_negative_int, parse_word_list, positive_int


def test_parse_word_list_splits_on_spaces_and_commas() -> None:
    assert parse_word_list(["alpha beta", "gamma,delta", " ,"]) == [
        "alpha",
        "beta",
        "gamma",
        "delta",
    ]
    assert parse_word_list(None) == []


def test_non_negative_int() -> None:
    assert non_negative_int("0") == 0
    assert non_negative_int("12") == 12
    with pytest.raises(argparse.ArgumentTypeError, match="non-negative"):
        _ = non_negative_int("-3")
    with pytest.raises(argparse.ArgumentTypeError, match="integer"):
        _ = non_negative_int("ten")


def test_positive_int_rejects_zero() -> None:
    assert positive_int("5") == 5
    with pytest.raises(argparse.ArgumentTypeError, match="at least 1"):
        _ = positive_int("0")


def test_echo_targets_stdout_and_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    echo("out")
    echo("err", err=True)
    echo("partial", newline=False)

    captured = capsys.readouterr()
    assert captured.out == "out\npartial"
    assert captured.err == "err\n"
