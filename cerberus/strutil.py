"""String helpers: case-insensitive comparison, integer parsing, splitting."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import timedelta

from cerberus.errors import BadRedisMessage

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)\s*")


def strnieq(lhs: str, rhs: str, n: int) -> bool:
    """Compare at most ``n`` characters of two strings, ignoring case."""
    for a, b in zip(lhs[:n], rhs[:n]):
        if a.upper() != b.upper():
            return False
    if min(len(lhs), len(rhs)) < n:
        return len(lhs) == len(rhs)
    return True


def stristartswith(s: str, pre: str) -> bool:
    """Tell whether ``s`` starts with ``pre``, ignoring case."""
    return strnieq(s, pre, len(pre))


def atoi(a: str) -> int:
    """Parse a decimal integer surrounded by optional whitespace."""
    match = _INTEGER.fullmatch(a)
    if match is None:
        raise BadRedisMessage("Invalid integer literal: " + a)
    return int(match.group(1))


def to_str(value: object) -> str:
    """Render a value the way the proxy writes it into messages and logs."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, timedelta):
        return to_str(value.total_seconds())
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def split_str(s: str, delimiters: str = " ", trim_empty: bool = False) -> list[str]:
    """Split ``s`` at every character found in ``delimiters``."""
    parts: list[str] = []
    current: list[str] = []
    for ch in s:
        if ch in delimiters:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    if trim_empty:
        return [p for p in parts if p]
    return parts


def join(sep: str, values: Iterable[str]) -> str:
    """Join strings with a separator."""
    return sep.join(values)