"""Severity scale for log lines.

Values follow the BSD syslog ordering (RFC 3164, section 4.1.1): lower is
more severe. ``OFF`` is a configuration value that disables logging; it is
never a real message severity.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Union


class Severity(IntEnum):
    EMERG = 0  # system is unusable
    ALERT = 1  # action must be taken immediately
    CRIT = 2  # critical conditions
    ERR = 3  # error conditions
    WARN = 4  # warning conditions
    NOTICE = 5  # normal but significant condition
    INFO = 6  # informational messages
    DEBUG = 7  # debug messages

    OFF = 8  # log nothing at all

    # Deprecated alias: resolves to CRIT
    FATAL = 2


_LABELS = {
    Severity.EMERG: "EMERG",
    Severity.ALERT: "ALERT",
    Severity.CRIT: "CRIT",
    Severity.ERR: "ERROR",
    Severity.WARN: "WARN",
    Severity.NOTICE: "NOTICE",
    Severity.INFO: "INFO",
    Severity.DEBUG: "DEBUG",
}

GENERIC_LABEL = "LOG"

# Spellings accepted in addition to the member names
_NAME_ALIASES = {"ERROR": "ERR", "WARNING": "WARN", "CRITICAL": "CRIT", "EMERGENCY": "EMERG"}


def level_label(severity: int) -> str:
    """Return the fixed label for ``severity``, or ``"LOG"`` if it has none."""
    return _LABELS.get(severity, GENERIC_LABEL)


def parse_severity(value: Union[Severity, int, str]) -> Severity:
    """Coerce a config/CLI value into a Severity.

    Accepts a Severity, an int in 0..8, a numeric string, or a level name
    (case-insensitive, ``FATAL`` included). Raises ValueError otherwise.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid severity: {value!r}")
    if isinstance(value, int):
        return Severity(value)
    if isinstance(value, str):
        s = value.strip()
        if s.lstrip("-").isdigit():
            return Severity(int(s))
        try:
            name = s.upper()
            return Severity[_NAME_ALIASES.get(name, name)]
        except KeyError:
            pass
    raise ValueError(f"Invalid severity: {value!r}")
