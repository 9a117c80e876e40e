from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOCALE = "en-US"
DEFAULT_LOCALE_ENGINE = "babel"


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults for locale output."""

    default_locale: str = DEFAULT_LOCALE
    locale_engine: str = DEFAULT_LOCALE_ENGINE

    @classmethod
    def from_env(cls) -> "Settings":
        """Read DATEBUILDER_* variables (a .env file is honoured if present)."""
        load_dotenv(find_dotenv(usecwd=True))
        locale = os.environ.get("DATEBUILDER_DEFAULT_LOCALE", "").strip()
        engine = os.environ.get("DATEBUILDER_LOCALE_ENGINE", "").strip()
        return cls(
            default_locale=locale or DEFAULT_LOCALE,
            locale_engine=engine or DEFAULT_LOCALE_ENGINE,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
