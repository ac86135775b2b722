"""Timestamp rendering for log line prefixes.

Formats use ``strftime`` directives. The glibc ``%-X`` forms (no zero
padding) are resolved here so they behave the same on every platform.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

DEFAULT_DATE_FORMAT = "%Y-%m-%d %-H:%M:%S"

_UNPADDED = re.compile(r"%%|%-([dmHIMSjy])")


def _unpadded(moment: datetime, code: str) -> str:
    if code == "d":
        return str(moment.day)
    if code == "m":
        return str(moment.month)
    if code == "H":
        return str(moment.hour)
    if code == "I":
        return str(moment.hour % 12 or 12)
    if code == "M":
        return str(moment.minute)
    if code == "S":
        return str(moment.second)
    if code == "j":
        return str(moment.timetuple().tm_yday)
    return str(moment.year % 100)


def format_timestamp(fmt: str, moment: Optional[datetime] = None) -> str:
    """Render ``moment`` (default: now) with ``fmt``.

    Unpadded directives are substituted first; literal ``%%`` is left for
    ``strftime`` to handle.
    """
    moment = moment or datetime.now()

    def _sub(m: re.Match) -> str:
        if m.group(1) is None:
            return m.group(0)
        return _unpadded(moment, m.group(1))

    return moment.strftime(_UNPADDED.sub(_sub, fmt))
