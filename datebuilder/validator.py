from __future__ import annotations

from datetime import date

from .types import MAX_DAY, MAX_MONTH, MIN_DAY, MIN_MONTH, ValidationResult

INVALID_DAY = "Invalid day"
INVALID_MONTH = "Invalid month"
INVALID_COMBINATION = "Invalid date combination"


def _as_int(value: object) -> int | None:
    """Return value as an int if it is integral (bools are not numbers here)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def is_day_valid(day: object) -> bool:
    d = _as_int(day)
    return d is not None and MIN_DAY <= d <= MAX_DAY


def is_month_valid(month: object) -> bool:
    m = _as_int(month)
    return m is not None and MIN_MONTH <= m <= MAX_MONTH


def _is_real_date(day: int, month: int, year: object) -> bool:
    y = _as_int(year)
    if y is None:
        return False
    try:
        d = date(y, month, day)
    except (ValueError, OverflowError):
        return False
    return (d.year, d.month, d.day) == (y, month, day)


def validate_date_parts(day: object, month: object, year: object) -> ValidationResult:
    """Check whether (day, month, year) names a real calendar date.

    Checks run in a fixed order and every failure is reported:
    - day is an integer in [1, 31]
    - month is an integer in [1, 12]
    - only if both passed: the triple builds the very same date (catches
      Feb 30, Apr 31, Feb 29 outside leap years, unusable years)
    """
    errors: list[str] = []

    day_ok = is_day_valid(day)
    if not day_ok:
        errors.append(INVALID_DAY)

    month_ok = is_month_valid(month)
    if not month_ok:
        errors.append(INVALID_MONTH)

    if day_ok and month_ok and not _is_real_date(_as_int(day), _as_int(month), year):
        errors.append(INVALID_COMBINATION)

    return ValidationResult(is_valid=not errors, errors=tuple(errors))


class DateValidator:
    """Stateful wrapper around validate_date_parts() for callers that want to
    ask for validity first and read the error list afterwards."""

    def __init__(self, day: object, month: object, year: object) -> None:
        self.day = day
        self.month = month
        self.year = year
        self._result: ValidationResult | None = None

    def is_valid_input(self) -> bool:
        self._result = validate_date_parts(self.day, self.month, self.year)
        return self._result.is_valid

    @property
    def errors(self) -> list[str]:
        if self._result is None:
            self.is_valid_input()
        return list(self._result.errors)
