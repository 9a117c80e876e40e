"""Locale-aware output.

Formatting is delegated to a LocaleFormatter so the CLDR data stays outside
this package; the Babel-backed engine is the only one shipped.
"""

from .base import LocaleFormatter
from .babel_engine import BabelLocaleFormatter
from .options import LocaleOptions
from .registry import build_formatter
