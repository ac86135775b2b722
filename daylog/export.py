"""Readable, source-like dumps of arbitrary values.

``export_value`` is what the logger writes after a line prefix. Containers
and objects are laid out one item per line so keys, indices and the types
of nested values stay visible in the log file:

    {
        'name': 'alice',
        'tags': [
            'a',
            'b',
        ],
    }
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, List, Set

INDENT = "    "

_SCALARS = (type(None), bool, int, float, complex, str, bytes, bytearray)


def export_value(value: Any) -> str:
    """Return a multi-line, indented representation of ``value``."""
    return _export(value, 0, set())


def _export(value: Any, depth: int, seen: Set[int]) -> str:
    if isinstance(value, _SCALARS) or isinstance(value, enum.Enum):
        return repr(value)

    if isinstance(value, (dict, list, tuple, set, frozenset)) or _has_fields(value):
        if id(value) in seen:
            return f"<Recursion on {type(value).__name__} with id={id(value)}>"
        seen.add(id(value))
        try:
            return _export_compound(value, depth, seen)
        finally:
            seen.discard(id(value))

    return repr(value)


def _has_fields(value: Any) -> bool:
    if isinstance(value, type):
        return False
    if isinstance(value, BaseException):
        return True
    if dataclasses.is_dataclass(value):
        return True
    return bool(getattr(value, "__dict__", None))


def _export_compound(value: Any, depth: int, seen: Set[int]) -> str:
    pad = INDENT * (depth + 1)
    lines: List[str] = []

    if isinstance(value, dict):
        for k, v in value.items():
            lines.append(f"{pad}{_export(k, depth + 1, seen)}: {_export(v, depth + 1, seen)},")
        return _wrap("{", lines, "}", depth, empty="{}")

    if isinstance(value, (list, tuple, set, frozenset)) and not _is_namedtuple(value):
        items = value
        if isinstance(value, (set, frozenset)):
            # sets have no stable order; sort by repr so dumps are reproducible
            items = sorted(value, key=repr)
        for item in items:
            lines.append(f"{pad}{_export(item, depth + 1, seen)},")
        open_, close, empty = _BRACKETS[_base(value)]
        return _wrap(open_, lines, close, depth, empty=empty)

    if _is_namedtuple(value):
        fields = value._asdict()
    elif dataclasses.is_dataclass(value):
        fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    else:
        fields = dict(vars(value))
    name = type(value).__name__
    if isinstance(value, BaseException):
        # exception message and args live outside __dict__
        for arg in value.args:
            lines.append(f"{pad}{_export(arg, depth + 1, seen)},")
    for k, v in fields.items():
        lines.append(f"{pad}{k}={_export(v, depth + 1, seen)},")
    return _wrap(f"{name}(", lines, ")", depth, empty=f"{name}()")


_BRACKETS = {
    list: ("[", "]", "[]"),
    tuple: ("(", ")", "()"),
    set: ("{", "}", "set()"),
    frozenset: ("frozenset({", "})", "frozenset()"),
}


def _base(value: Any) -> type:
    for kind in _BRACKETS:
        if isinstance(value, kind):
            return kind
    return list


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, "_fields")


def _wrap(open_: str, lines: List[str], close: str, depth: int, empty: str) -> str:
    if not lines:
        return empty
    return "\n".join([open_, *lines, INDENT * depth + close])
