"""Parsing of step counts and durations found in activity records."""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_STEPS_RE = re.compile(r"[+-]?[0-9]+")
_COMPONENT_RE = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")

_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}


def parse_steps(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits.

    Only ASCII digits with an optional leading sign are accepted; no
    whitespace, underscores or other characters.
    """
    if not _STEPS_RE.fullmatch(text):
        raise ValueError(f"invalid step count: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"step count out of range: {text!r}")
    return value


def _component_value(number: str, unit: str) -> Fraction:
    whole, _, fraction = number.partition(".")
    value = Fraction(int(whole or "0"))
    if fraction:
        value += Fraction(int(fraction), 10 ** len(fraction))
    return value * _UNIT_NANOSECONDS[unit]


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1h30m"``, ``"1.5h"`` or ``"-45s"``.

    The string is an optional sign followed by one or more decimal numbers,
    each with a unit suffix (ns, us, µs, ms, s, m, h). A bare ``"0"`` is also
    accepted. The value is truncated to whole microseconds.
    """
    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration: {text!r}")

    total = Fraction(0)
    position = 0
    while position < len(body):
        match = _COMPONENT_RE.match(body, position)
        if match is None:
            raise ValueError(f"invalid duration: {text!r}")
        total += _component_value(match[1], match[2])
        position = match.end()

    nanoseconds = int(total)
    limit = 2**63 if negative else _INT64_MAX
    if nanoseconds > limit:
        raise ValueError(f"invalid duration: {text!r}")

    microseconds = nanoseconds // 1_000
    return timedelta(microseconds=-microseconds if negative else microseconds)