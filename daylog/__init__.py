"""daylog: leveled logger appending to one dated file per instance.

Exports:
- Logger, Status: the file logger and its lifecycle states
- Severity: RFC 3164 severity scale (plus OFF)
- export_value: the value dump written after each line prefix
"""
from .logger import Logger, Status  # noqa: F401
from .severity import Severity  # noqa: F401
from .export import export_value  # noqa: F401
