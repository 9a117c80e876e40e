from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from babel import Locale
from babel.dates import format_date, match_skeleton, parse_pattern, tokenize_pattern, untokenize_pattern

from .base import LocaleFormatter
from .options import LocaleOptions

logger = logging.getLogger(__name__)

DEFAULT_SKELETON = "yMd"

# CLDR skeleton symbols per component, in canonical skeleton order.
SKELETON_SYMBOLS: dict[str, dict[str, str]] = {
    "era": {"long": "GGGG", "short": "G", "narrow": "GGGGG"},
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {"numeric": "M", "2-digit": "MM", "long": "MMMM", "short": "MMM", "narrow": "MMMMM"},
    "weekday": {"long": "EEEE", "short": "E", "narrow": "EEEEE"},
    "day": {"numeric": "d", "2-digit": "dd"},
}

# Pattern letters that render the same component as a skeleton letter.
_FIELD_FAMILY = {
    "G": "G",
    "y": "y",
    "Y": "y",
    "u": "y",
    "M": "M",
    "L": "M",
    "E": "E",
    "c": "E",
    "e": "E",
    "d": "d",
}


def parse_locale(locale_tag: str) -> Locale:
    """Accept both BCP 47 ("en-US") and POSIX ("en_US") spellings."""
    sep = "-" if "-" in locale_tag else "_"
    return Locale.parse(locale_tag, sep=sep)


def build_skeleton(options: LocaleOptions) -> str:
    parts = []
    for component, symbols in SKELETON_SYMBOLS.items():
        style = getattr(options, component)
        if style:
            parts.append(symbols[style])
    return "".join(parts) or DEFAULT_SKELETON


def expand_widths(pattern: str, skeleton: str) -> str:
    """Give every field of pattern the width the skeleton asked for.

    Babel's skeleton matching returns the closest locale pattern as-is, so a
    request for "EEEE" may come back as "ccc" (short weekday).
    """
    wanted = {char: width for kind, (char, width) in _fields(skeleton)}
    out = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, width = value
            family = _FIELD_FAMILY.get(char)
            if family in wanted:
                value = (char, wanted[family])
        out.append((kind, value))
    return untokenize_pattern(out)


def _fields(pattern: str) -> list[tuple[str, tuple[str, int]]]:
    return [t for t in tokenize_pattern(pattern) if t[0] == "field"]


@dataclass
class BabelLocaleFormatter(LocaleFormatter):
    """CLDR date formatting via Babel."""

    name: str = "babel"

    def format_date(self, value: date, locale_tag: str, options: LocaleOptions) -> str:
        locale = parse_locale(locale_tag)

        if options.date_style:
            logger.debug("Formatting %s for %s with %s style", value, locale, options.date_style)
            return format_date(value, format=options.date_style, locale=locale)

        skeleton = build_skeleton(options)
        skeletons = locale.datetime_skeletons
        matched = skeleton if skeleton in skeletons else match_skeleton(skeleton, skeletons)
        if matched is None:
            logger.debug("No CLDR skeleton close to %s for %s; using it as a pattern", skeleton, locale)
            return format_date(value, format=skeleton, locale=locale)

        pattern = expand_widths(parse_pattern(skeletons[matched]).pattern, skeleton)
        logger.debug("Formatting %s for %s: skeleton %s -> pattern %s", value, locale, skeleton, pattern)
        return format_date(value, format=pattern, locale=locale)
