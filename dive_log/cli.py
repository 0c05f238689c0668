#!/usr/bin/env python
"""Log a dive by filling in a three-page form in the terminal.

Usage:
    dive-log
    dive-log --headless --script keys.txt
    dive-log --headless --script - < keys.txt

Keys:
    Enter       next field; on the last field, submit and print gas remaining
    Tab         next field        Shift+Tab   previous field
    Right       next page (all fields on the page must be filled)
    Left        previous page
    Esc/Ctrl+C  quit without saving

Headless scripts hold one key name per line (tab, enter, left, right,
shift+tab, escape, backspace, ctrl+u, ctrl+w, space) or "type <text>".
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .config import DiveLogConfig, load_config
from .navigation import OutcomeKind
from .ui import (
    DisplayBackend,
    HeadlessDisplayBackend,
    RichDisplayBackend,
    RunUiResult,
    parse_script,
    run_headless,
    run_tui,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "dive_log"


def configure_logging(
    level: int, log_file: str | None, *, headless: bool, stream: TextIO | None = None
) -> logging.Logger:
    """Attach one handler to the package logger.

    The TUI owns the terminal, so without a log file it gets a NullHandler;
    headless runs log to stderr.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    elif headless:
        handler = logging.StreamHandler(stream or sys.stderr)
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


def _resolve_level(config: DiveLogConfig, verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return config.logging.level_number


def _read_script(path: str) -> list[str]:
    if path == "-":
        return sys.stdin.read().splitlines()
    return Path(path).read_text(encoding="utf-8").splitlines()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dive-log",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Replay a key script instead of opening the TUI",
    )
    parser.add_argument(
        "--script",
        metavar="FILE",
        help="Key script for headless mode ('-' reads stdin)",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Render headless frames with Rich panels",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log more (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file (default: config or $DIVE_LOG_LOG_FILE)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show full tracebacks on error",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the dive-log CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.script and not args.headless:
        args.headless = True
    if args.headless and not args.script:
        parser.error("--headless requires --script")
    if args.rich and not args.headless:
        parser.error("--rich only applies to headless mode")

    try:
        config = load_config(Path.cwd())
        log_file = args.log_file or config.logging.file
        configure_logging(
            _resolve_level(config, args.verbose), log_file, headless=args.headless
        )
        if config.path is not None:
            logger.debug("Loaded config from %s", config.path)

        result: RunUiResult
        if args.headless:
            keys = parse_script(_read_script(args.script))
            backend: DisplayBackend
            if args.rich:
                backend = RichDisplayBackend(stream=sys.stderr)
            else:
                backend = HeadlessDisplayBackend(stream=sys.stderr)
            result = run_headless(keys, backends=[backend])
        else:
            result = run_tui(mouse=config.ui.mouse)
    except KeyboardInterrupt:
        print("\nAborted by user", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if args.debug:
            raise
        return 1

    outcome = result.outcome
    if outcome.kind is OutcomeKind.SUBMITTED and outcome.error is None:
        print(f"Gas remaining: {outcome.gas_remaining}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
