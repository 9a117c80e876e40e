from __future__ import annotations

import re
from datetime import datetime, timezone

from .types import MONTH_NAMES, WEEKDAY_NAMES

NUMERIC_TOKEN_RE = re.compile(r"yyyy|MM|dd")


def _capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def _text_values(moment: datetime) -> dict[str, str]:
    month = MONTH_NAMES[moment.month - 1]
    weekday = _capitalize(WEEKDAY_NAMES[(moment.weekday() + 1) % 7])
    short_weekday = weekday[:3]

    # Insertion order is the substitution order.
    return {
        "MMMM": _capitalize(month),
        "MMM": month[:3],
        "dddd": weekday,
        "ddd": short_weekday,
        "E": short_weekday,
        "DDDD": weekday,
    }


def format_moment(moment: datetime, pattern: str) -> str:
    """Replace date tokens in pattern using the UTC calendar fields of moment.

    Text tokens go first, each replaced everywhere in the pattern, in order
    MMMM, MMM, dddd, ddd, E, DDDD. Numeric tokens (yyyy, MM, dd) follow in a
    single pass. Anything else is copied through; there is no escaping.

    Replacement is plain substring replacement, so a later token also matches
    text produced by an earlier one. A literal capital "E" anywhere in the
    pattern becomes the short weekday name.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)

    out = pattern
    for token, value in _text_values(moment).items():
        out = out.replace(token, value)

    numbers = {
        "yyyy": str(moment.year),
        "MM": f"{moment.month:02d}",
        "dd": f"{moment.day:02d}",
    }
    return NUMERIC_TOKEN_RE.sub(lambda m: numbers[m.group(0)], out)
