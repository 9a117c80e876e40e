from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from .options import LocaleOptions


class LocaleFormatter(ABC):
    name: str

    @abstractmethod
    def format_date(self, value: date, locale_tag: str, options: LocaleOptions) -> str:
        """Return value rendered for locale_tag (a BCP 47 tag such as "de-DE")."""
        raise NotImplementedError
