"""Leveled file logger writing one dated file per instance.

Usage:
    log = Logger("/var/log/myapp", Severity.INFO)
    log.log_info("Returned a million search results")
    log.log(Severity.ERR, "x = 5", {"user": "alice"})   # one line per value
    log.log(Severity.OFF, payload)                         # switched off: never written

Each line is ``<timestamp> - <LABEL> --> <dump>`` and goes to
``<directory>/log_<YYYY-MM-DD>.txt``. File problems never raise; they are
reported through ``status`` and the message queue (``get_messages``).
"""
from __future__ import annotations

import logging
import os
from datetime import date
from enum import IntEnum
from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Union

from daylog.export import export_value
from daylog.severity import Severity, level_label
from daylog.timestamp import DEFAULT_DATE_FORMAT, format_timestamp

logger = logging.getLogger(__name__)

# Used when no directory is given: the package's own location
DEFAULT_DIRECTORY = Path(__file__).resolve().parent

DEFAULT_PERMISSIONS = 0o777


class Status(IntEnum):
    OPEN = 1
    OPEN_FAILED = 2
    CLOSED = 3


def _is_writable(path: Path) -> bool:
    return os.access(path, os.W_OK)


class Logger:
    """Append-only leveled logger bound to a single daily file.

    One instance owns one file handle. Share an instance by passing it
    around; there is no per-directory registry.
    """

    # Standard messages pushed onto the queue. Override for i18n.
    MESSAGES: Dict[str, str] = {
        "writefail": "The file could not be written to. Check that appropriate permissions have been set.",
        "opensuccess": "The log file was opened successfully.",
        "openfail": "The file could not be opened. Check permissions.",
    }

    # Process-wide default for instances built without ``date_format``
    _default_date_format: str = DEFAULT_DATE_FORMAT

    def __init__(
        self,
        directory: Union[str, Path, None] = None,
        severity: Union[Severity, int, None] = None,
        date_format: Optional[str] = None,
    ) -> None:
        self._status = Status.CLOSED
        self.file_path: Optional[Path] = None
        self._file_handle: Optional[IO[str]] = None
        self._message_queue: List[str] = []
        self._date_format = date_format

        self._severity_threshold = Severity(Severity.INFO if severity is None else severity)
        if self._severity_threshold == Severity.OFF:
            return

        if directory is None:
            directory = DEFAULT_DIRECTORY
        raw = str(directory)
        directory = raw.rstrip("\\/") or raw[:1] or "."

        self.file_path = Path(directory) / f"log_{date.today():%Y-%m-%d}.txt"

        os.makedirs(directory, DEFAULT_PERMISSIONS, exist_ok=True)

        if self.file_path.exists() and not _is_writable(self.file_path):
            logger.warning("Log file %s exists but is not writable", self.file_path)
            self._status = Status.OPEN_FAILED
            self._message_queue.append(self.MESSAGES["writefail"])
            return

        try:
            self._file_handle = open(self.file_path, "a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to open log file %s: %s", self.file_path, exc)
            self._status = Status.OPEN_FAILED
            self._message_queue.append(self.MESSAGES["openfail"])
            return

        logger.debug("Opened log file %s (threshold=%s)", self.file_path, self._severity_threshold.name)
        self._status = Status.OPEN
        self._message_queue.append(self.MESSAGES["opensuccess"])

    @classmethod
    def from_config(cls, cfg=None) -> "Logger":
        """Build a logger from ``config.settings.AppConfig`` (a new one when omitted)."""
        from config.settings import AppConfig

        cfg = cfg or AppConfig()
        return cls(cfg.log_directory, cfg.log_severity, cfg.log_date_format)

    @property
    def status(self) -> Status:
        return self._status

    @property
    def severity_threshold(self) -> Severity:
        """Most verbose severity still written; fixed at construction."""
        return self._severity_threshold

    # -- lifecycle -----------------------------------------------------

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        handle, self._file_handle = self._file_handle, None
        if handle is not None:
            handle.close()
        self._status = Status.CLOSED

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may have failed before the attribute existed
        if getattr(self, "_file_handle", None) is not None:
            self.close()

    # -- message queue -------------------------------------------------

    def get_message(self) -> Optional[str]:
        """Remove and return the most recent message, or None when empty."""
        if not self._message_queue:
            return None
        return self._message_queue.pop()

    def get_messages(self) -> List[str]:
        """Return a copy of the whole queue, oldest first."""
        return list(self._message_queue)

    def clear_messages(self) -> None:
        self._message_queue.clear()

    # -- date format ---------------------------------------------------

    @staticmethod
    def set_date_format(date_format: str) -> None:
        """Change the timestamp format for instances without their own."""
        Logger._default_date_format = date_format

    @staticmethod
    def reset_date_format() -> None:
        Logger._default_date_format = DEFAULT_DATE_FORMAT

    @property
    def date_format(self) -> str:
        return self._date_format or Logger._default_date_format

    # -- writing -------------------------------------------------------

    def log_info(self, *values: Any) -> None:
        """Log every value on its own INFO line."""
        self.log(Severity.INFO, *values)

    def log(self, severity: int, *values: Any) -> None:
        """Log each of ``values`` on its own line at ``severity``.

        Messages less severe than the threshold are dropped before any
        formatting. With no values a bare prefix line is written.
        """
        if self._severity_threshold < severity:
            return

        prefix = self._time_line(severity)

        if not values:
            self.write_free_form_line(prefix + "\n")
            return

        for value in values:
            self.write_free_form_line(prefix + " " + export_value(value) + "\n")

    def write_free_form_line(self, line: str) -> None:
        """Write ``line`` as-is, without timestamp or level prefix."""
        if self._status != Status.OPEN or self._severity_threshold == Severity.OFF:
            return
        try:
            self._file_handle.write(line)
            self._file_handle.flush()
        except (OSError, ValueError) as exc:
            logger.warning("Write to %s failed: %s", self.file_path, exc)
            self._message_queue.append(self.MESSAGES["writefail"])

    def _time_line(self, severity: int) -> str:
        return f"{format_timestamp(self.date_format)} - {level_label(severity)} -->"
