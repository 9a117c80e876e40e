from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import MINYEAR, date, datetime, timedelta, timezone, tzinfo
from typing import NoReturn

from .l10n import LocaleFormatter, LocaleOptions, build_formatter
from .normalize import EPOCH, normalize_input, now
from .settings import get_settings
from .tokens import format_moment
from .types import DateParts

logger = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)


def _calendar_date(moment: datetime, zone: tzinfo | None = None) -> date:
    """Calendar date of moment in zone (None: host local zone).

    A zone offset that would step outside the datetime range clamps to the
    first or last representable date.
    """
    try:
        return moment.astimezone(zone).date()
    except OverflowError:
        return date.min if moment.year == MINYEAR else date.max


@dataclass(frozen=True, init=False)
class DateBuilder:
    """An immutable, validated date.

    Build one with DateBuilder.from_input() or DateBuilder.from_now(); calling
    the class directly is an error. The wrapped moment is an aware UTC datetime.

    Example:
        >>> DateBuilder.from_input("2024-11-30").format("dddd, MMMM dd, yyyy")
        'Saturday, November 30, 2024'
    """

    moment: datetime

    def __init__(self, *args: object, **kwargs: object) -> NoReturn:
        raise TypeError("DateBuilder cannot be instantiated directly; use DateBuilder.from_input() or DateBuilder.from_now()")

    @classmethod
    def _wrap(cls, moment: datetime) -> "DateBuilder":
        obj = object.__new__(cls)
        object.__setattr__(obj, "moment", moment)
        return obj

    @classmethod
    def from_input(cls, value: object) -> "DateBuilder":
        """Build from an ISO string, "YYYY-MM-DD" text, a Unix timestamp (seconds
        or milliseconds), a date/datetime, or a day/month/year record.

        Raises DateValidationError if value cannot be normalized.
        """
        return cls._wrap(normalize_input(value))

    @classmethod
    def from_now(cls) -> "DateBuilder":
        return cls._wrap(now())

    def format(self, pattern: str) -> str:
        """Render with tokens MMMM, MMM, dddd/DDDD, ddd/E, yyyy, MM, dd.

        e.g. "yyyy/MM/dd" -> "2025/05/04", "E, MMM dd yyyy" -> "Sun, May 04 2025"
        """
        return format_moment(self.moment, pattern)

    def to_iso(self) -> str:
        m = self.moment
        return (
            f"{m.year:04d}-{m.month:02d}-{m.day:02d}"
            f"T{m.hour:02d}:{m.minute:02d}:{m.second:02d}.{m.microsecond // 1000:03d}Z"
        )

    def to_unix(self) -> int:
        return self.to_unix_ms() // 1000

    def to_unix_ms(self) -> int:
        return (self.moment - EPOCH) // _ONE_MS

    def to_date(self) -> datetime:
        """Return an independent aware UTC datetime equal to the wrapped moment."""
        m = self.moment
        return datetime(m.year, m.month, m.day, m.hour, m.minute, m.second, m.microsecond, tzinfo=timezone.utc)

    def to_object(self) -> DateParts:
        """Day/month/year as seen in the host's local time zone.

        Note: everything else reads UTC fields, so west of UTC a midnight moment
        reports the previous day here.
        """
        local = _calendar_date(self.moment)
        return DateParts(day=local.day, month=local.month, year=local.year)

    def to_locale(
        self,
        locale_tag: str | None = None,
        options: LocaleOptions | Mapping[str, str] | None = None,
        *,
        formatter: LocaleFormatter | None = None,
    ) -> str:
        """Render the date for a locale, e.g. to_locale("de-DE", {"weekday": "long"}).

        The calendar date is taken in options.time_zone when given, otherwise
        in the host's local zone. Unknown locales surface the engine's error.
        """
        settings = get_settings()
        if not isinstance(options, LocaleOptions):
            options = LocaleOptions.from_mapping(options)
        if formatter is None:
            formatter = build_formatter(settings.locale_engine)
        tag = locale_tag or settings.default_locale

        local = _calendar_date(self.moment, options.zone())
        logger.debug("Locale formatting %s as %s via %s", self.to_iso(), tag, formatter.name)
        return formatter.format_date(local, tag, options)
