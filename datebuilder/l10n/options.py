from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import timezone, tzinfo

from babel.dates import get_timezone

logger = logging.getLogger(__name__)

TEXT_STYLES = ("long", "short", "narrow")
NUMERIC_STYLES = ("numeric", "2-digit")
DATE_STYLES = ("full", "long", "medium", "short")

_ALLOWED: dict[str, tuple[str, ...]] = {
    "weekday": TEXT_STYLES,
    "era": TEXT_STYLES,
    "year": NUMERIC_STYLES,
    "month": NUMERIC_STYLES + TEXT_STYLES,
    "day": NUMERIC_STYLES,
    "date_style": DATE_STYLES,
}

# Host-style camelCase option names accepted by from_mapping().
_ALIASES = {
    "dateStyle": "date_style",
    "timeZone": "time_zone",
}

_UTC_NAMES = ("UTC", "ETC/UTC", "GMT", "Z")


@dataclass(frozen=True)
class LocaleOptions:
    """Which date components to render, and how wide.

    With no component set, a numeric year/month/day is rendered. date_style
    picks one of the locale's predefined formats and cannot be combined with
    individual components.
    """

    weekday: str | None = None
    era: str | None = None
    year: str | None = None
    month: str | None = None
    day: str | None = None
    date_style: str | None = None
    time_zone: str | None = None

    def __post_init__(self) -> None:
        for key, allowed in _ALLOWED.items():
            val = getattr(self, key)
            if val is not None and val not in allowed:
                raise ValueError(f"Invalid value for {key}: {val!r} (expected one of {', '.join(allowed)})")
        if self.date_style and self.has_components():
            raise ValueError("date_style cannot be combined with weekday/era/year/month/day")

    @classmethod
    def from_mapping(cls, opts: Mapping[str, str] | None) -> "LocaleOptions":
        if not opts:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, str] = {}
        for key, val in opts.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown locale option %r", key)
                continue
            kwargs[name] = val
        return cls(**kwargs)

    def has_components(self) -> bool:
        return any(getattr(self, k) for k in ("weekday", "era", "year", "month", "day"))

    def zone(self) -> tzinfo | None:
        """Zone to read the calendar date in; None means the host's local zone."""
        if not self.time_zone:
            return None
        if self.time_zone.upper() in _UTC_NAMES:
            return timezone.utc
        return get_timezone(self.time_zone)
