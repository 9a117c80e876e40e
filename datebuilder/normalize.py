"""Turn any supported input into a single UTC moment.

Dispatch is by the runtime shape of the input, in a fixed priority order:
native date/datetime, text, number, day/month/year record. The order matters:
a date object must never be read as a record (it has day/month/year too),
and the strict ISO-with-time form must be tried before the permissive
hyphen split since both start with YYYY-MM-DD.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timedelta, timezone

from .errors import DateValidationError
from .types import TIMESTAMP_MS_THRESHOLD
from .validator import validate_date_parts

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

ISO_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<ms>[0-9]{3}))?Z"
)

_SEGMENT_RE = re.compile(r"\s*[0-9]+\s*")

_PART_FIELDS = ("day", "month", "year")


def _utc_midnight(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _utc_rollover(year: int, month: int, day: int) -> datetime:
    """UTC midnight with ordinary calendar overflow: month 13 is January of the
    next year, day 0 is the last day of the previous month, and so on."""
    y, m0 = divmod(year * 12 + (month - 1), 12)
    return _utc_midnight(y, m0 + 1, 1) + timedelta(days=day - 1)


def from_native(value: date) -> datetime:
    """Keep only the local calendar date of a date/datetime, as UTC midnight."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        try:
            value = value.astimezone()
        except OverflowError:
            raise DateValidationError("Date out of range") from None
    return _utc_midnight(value.year, value.month, value.day)


def parse_iso_string(text: str) -> datetime | None:
    """Parse YYYY-MM-DDTHH:MM:SS[.sss]Z as an exact instant.

    Returns None when the text does not have that shape at all. Hour 24
    ("T24:00:00Z") is rejected, not read as the next midnight.
    """
    m = ISO_RE.fullmatch(text)
    if not m:
        return None
    try:
        return datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            int(m.group("ms") or 0) * 1000,
            tzinfo=timezone.utc,
        )
    except ValueError:
        raise DateValidationError("Invalid ISO string") from None


def parse_ymd_string(text: str) -> datetime:
    """Parse year-month-day text split on '-'.

    Permissive on purpose: no calendar check, out-of-range parts roll over
    ("2023-02-29" is 2023-03-01).
    """
    parts = text.split("-")
    if len(parts) != 3 or not all(_SEGMENT_RE.fullmatch(p) for p in parts):
        raise DateValidationError("Invalid date format")

    year, month, day = (int(p) for p in parts)
    try:
        return _utc_rollover(year, month, day)
    except (ValueError, OverflowError):
        raise DateValidationError("Invalid date format") from None


def from_timestamp(value: int | float) -> datetime:
    """Unix timestamp: seconds below 1e12 in magnitude, milliseconds above."""
    if isinstance(value, float) and not math.isfinite(value):
        raise DateValidationError("Invalid timestamp")

    ms = value * 1000 if abs(value) < TIMESTAMP_MS_THRESHOLD else value
    try:
        return EPOCH + timedelta(milliseconds=int(ms))
    except OverflowError:
        raise DateValidationError("Invalid timestamp") from None


def _read_parts(value: object) -> tuple[object, object, object] | None:
    if isinstance(value, Mapping):
        if all(k in value for k in _PART_FIELDS):
            return value["day"], value["month"], value["year"]
        return None
    if all(hasattr(value, k) for k in _PART_FIELDS):
        return value.day, value.month, value.year  # type: ignore[attr-defined]
    return None


def from_date_parts(day: object, month: object, year: object) -> datetime:
    """Strict path: the triple must already be a real calendar date."""
    result = validate_date_parts(day, month, year)
    if not result.is_valid:
        raise DateValidationError(", ".join(result.errors))
    return _utc_midnight(int(year), int(month), int(day))  # type: ignore[call-overload]


def normalize_input(value: object) -> datetime:
    """Return the UTC moment for value, or raise DateValidationError."""

    try:
        moment = _dispatch(value)
    except DateValidationError as exc:
        logger.debug("Rejected date input %r: %s", value, exc.message)
        raise
    return moment


def _dispatch(value: object) -> datetime:
    if isinstance(value, date):
        logger.debug("Normalizing native %s", type(value).__name__)
        return from_native(value)

    if isinstance(value, str):
        moment = parse_iso_string(value)
        if moment is not None:
            logger.debug("Normalizing ISO instant %s", value)
            return moment
        logger.debug("Normalizing year-month-day text %r", value)
        return parse_ymd_string(value)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        logger.debug("Normalizing timestamp %r", value)
        return from_timestamp(value)

    parts = _read_parts(value)
    if parts is not None:
        logger.debug("Normalizing date parts %r", parts)
        return from_date_parts(*parts)

    raise DateValidationError("Unsupported date format")


def now() -> datetime:
    """Current UTC instant, truncated to milliseconds."""
    t = datetime.now(timezone.utc)
    return t.replace(microsecond=t.microsecond // 1000 * 1000)
