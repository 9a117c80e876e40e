from __future__ import annotations

from dataclasses import asdict, dataclass

MIN_DAY = 1
MAX_DAY = 31
MIN_MONTH = 1
MAX_MONTH = 12

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Sunday first, matching the usual weekday numbering of calendar tables.
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Numeric inputs below this magnitude are Unix seconds, otherwise milliseconds.
TIMESTAMP_MS_THRESHOLD = 10**12


@dataclass(frozen=True)
class DateParts:
    """A plain day/month/year record (month is 1-based)."""

    day: int
    month: int
    year: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a calendar check; errors keep the order the checks ran in."""

    is_valid: bool
    errors: tuple[str, ...] = ()
