# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI entry point for summarising compiler warnings in a log file."""

from __future__ import annotations

import argparse
import logging
import pathlib
from typing import TYPE_CHECKING, Final

from warnsum import __version__
from warnsum.api import summarise_file
from warnsum.cli.helpers import echo as _echo
from warnsum.cli.helpers import non_negative_int, parse_word_list, positive_int
from warnsum.cli.helpers import register_argument as _register_argument
from warnsum.config import DEFAULT_TOP_N, OptionsValidationError, build_options
from warnsum.core.model_types import LogComponent
from warnsum.exceptions import InputError
from warnsum.keywords import DEFAULT_MIN_KEYWORD_LENGTH
from warnsum.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from warnsum.report import render_report

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: logging.Logger = logging.getLogger("warnsum.cli")

WARNSUM_VERSION: Final[str] = __version__


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the warnsum command-line interface.

    Parses command-line arguments, configures logging, summarises the log file
    and prints the report on stdout.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code (0 for success, 1 when the log file cannot be read).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"warnsum {WARNSUM_VERSION}")
        return 0
    if args.path is None:
        parser.error("the following arguments are required: path")
    configure_logging(args.log_format, log_level=args.log_level)
    try:
        options = build_options(
            top_n=args.top_n,
            keyword_length=args.keyword_length,
            ignore=parse_word_list(args.ignore),
        )
    except OptionsValidationError as exc:
        parser.error(str(exc))

    try:
        snapshot = summarise_file(args.path, options)
    except InputError as exc:
        logger.debug(
            "Input rejected: %s",
            exc.reason,
            extra=structured_extra(component=LogComponent.CLI, path=str(exc.path), exit_code=1),
        )
        _echo(f"[warnsum] {exc}", err=True)
        return 1

    _echo(render_report(snapshot, top_n=options.top_n))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the warnsum CLI.

    Returns:
        argparse.ArgumentParser: Fully configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="warnsum",
        description="Summarise compiler warnings from a log file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "path",
        nargs="?",
        type=pathlib.Path,
        help="Path to the build log.",
    )
    _register_argument(
        parser,
        "-n",
        "--top-n",
        type=non_negative_int,
        default=DEFAULT_TOP_N,
        help="Number of rows to display in each section (0 shows every row).",
    )
    _register_argument(
        parser,
        "-k",
        "--keyword-length",
        type=positive_int,
        default=DEFAULT_MIN_KEYWORD_LENGTH,
        help="Minimum length of interesting keywords.",
    )
    _register_argument(
        parser,
        "-i",
        "--ignore",
        action="extend",
        nargs=1,
        default=[],
        metavar="WORDS",
        help="Extra keywords to ignore (space or comma separated; repeatable).",
    )
    _register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Set verbosity of logged events.",
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the warnsum version and exit.",
    )
    return parser


__all__ = ["main"]
