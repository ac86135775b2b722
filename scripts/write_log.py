#!/usr/bin/env python
"""Append values to today's log file from the command line.

Usage (from project root):
    python scripts/write_log.py "deploy started" "build 42"
    python scripts/write_log.py --level ERR "disk almost full"
    python scripts/write_log.py --raw "----- separator -----"

Defaults come from config/.env (LOG_DIRECTORY, LOG_SEVERITY,
LOG_DATE_FORMAT); command-line options override them.

Exit codes:
  0 - log file open, values handed to the logger
  1 - logging is OFF, nothing written
  2 - log file could not be opened or written
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

# Ensure project root is on sys.path so `config` and `daylog` import when run directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import AppConfig  # noqa: E402
from daylog.logger import Logger, Status  # noqa: E402
from daylog.severity import Severity, parse_severity  # noqa: E402


def _severity_arg(value: str) -> Severity:
    try:
        return parse_severity(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Append values to the daily log file")
    p.add_argument("values", nargs="*", help="Values to log, one line each")
    p.add_argument("--dir", dest="directory", default=None, help="Log directory (default: LOG_DIRECTORY or package dir)")
    p.add_argument("--severity", type=_severity_arg, default=None, help="Threshold name or number (default: LOG_SEVERITY or INFO)")
    p.add_argument("--level", type=_severity_arg, default=Severity.INFO, help="Severity of the logged values (default: INFO)")
    p.add_argument("--date-format", default=None, help="strftime format for timestamps")
    p.add_argument("--raw", action="store_true", help="Write values verbatim, without prefix")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = AppConfig()

    directory = args.directory or cfg.log_directory
    severity = cfg.log_severity if args.severity is None else args.severity
    date_format = args.date_format or cfg.log_date_format

    with Logger(directory, severity, date_format) as log:
        if log.severity_threshold == Severity.OFF:
            logger.warning("Logging is OFF; nothing written")
            return 1

        if args.raw:
            for value in args.values:
                log.write_free_form_line(value + "\n")
        else:
            log.log(args.level, *args.values)

        for message in log.get_messages():
            logger.info(message)

        if log.status != Status.OPEN:
            logger.error(f"Log file not writable: {log.file_path}")
            return 2
        if log.MESSAGES["writefail"] in log.get_messages():
            return 2

    logger.info(f"Wrote to {log.file_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
