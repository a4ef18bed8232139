"""Duration strings in the ``1h30m`` style."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

# Largest duration that fits in int64 nanoseconds (about 292 years)
MAX_DURATION_NS = 2**63 - 1

# Nanoseconds per unit
UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

_COMPONENT = re.compile(r"(?P<value>\d+\.?\d*|\.\d+)(?P<unit>[^\d.]*)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"1.5h"`` or ``"2h45m"``.

    A duration is an optional sign followed by one or more decimal numbers,
    each with a unit suffix. Valid units are ``ns``, ``us`` (or ``µs``),
    ``ms``, ``s``, ``m`` and ``h``. The bare string ``"0"`` is also accepted.

    Raises:
        ValueError: If the string is not a valid duration
    """
    original = text
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f'time: invalid duration "{original}"')

    total_ns = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f'time: invalid duration "{original}"')

        unit = match.group("unit")
        if not unit:
            raise ValueError(f'time: missing unit in duration "{original}"')
        if unit not in UNITS:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{original}"')

        total_ns += Decimal(match.group("value")) * UNITS[unit]
        pos = match.end()

    if total_ns > MAX_DURATION_NS:
        raise ValueError(f'time: invalid duration "{original}"')

    return sign * timedelta(microseconds=int(total_ns) // 1_000)
