"""Date parsing, validation and formatting.

Every supported input (ISO string, "YYYY-MM-DD" text, Unix timestamp, native
date/datetime, day/month/year record) is normalized into one immutable
DateBuilder wrapping a UTC moment, which then renders itself as tokens, ISO,
Unix time, a plain record, or a locale-specific string.
"""

from .builder import DateBuilder
from .errors import DateValidationError
from .l10n import BabelLocaleFormatter, LocaleFormatter, LocaleOptions, build_formatter
from .settings import Settings, get_settings
from .tokens import format_moment
from .types import MONTH_NAMES, WEEKDAY_NAMES, DateParts, ValidationResult
from .validator import DateValidator, is_day_valid, is_month_valid, validate_date_parts
