from __future__ import annotations

from .babel_engine import BabelLocaleFormatter
from .base import LocaleFormatter


def build_formatter(name: str) -> LocaleFormatter:
    """Locale engine factory.

    Keep flexible for other CLDR providers by adding new engines here.
    """
    n = (name or "babel").lower()
    if n in ("babel", "cldr"):
        return BabelLocaleFormatter()

    raise ValueError(f"Unsupported locale engine: {name} (only 'babel' is implemented for now)")
