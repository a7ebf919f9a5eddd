from __future__ import annotations

import re

SECONDS_PER_DAY = 24 * 60 * 60

SECONDS_PER_UNIT = {
    "sec": 1,
    "min": 60,
    "hour": 60 * 60,
    "day": SECONDS_PER_DAY,
    "week": 7 * SECONDS_PER_DAY,
    "month": 30 * SECONDS_PER_DAY,
    "year": 365 * SECONDS_PER_DAY,
}

# Units may be written in the plural: 3days, 2weeks
_SINCE_RE = re.compile(r"([0-9]+)(?:(sec|min|hour|day|week|month|year)s?)?")


def parse_since(value: str) -> int | None:
    """Convert a relative duration such as "3days" into seconds.

    A bare number is a count of seconds. Returns None when the value does not
    match the grammar.
    """
    m = _SINCE_RE.fullmatch(value.lower())
    if not m:
        return None
    unit = m.group(2) or "sec"
    return int(m.group(1)) * SECONDS_PER_UNIT[unit]
