"""Input hints telling the user how the current locale writes amounts."""
from __future__ import annotations

from babel import UnknownLocaleError
from babel.numbers import format_decimal

from .locales import to_babel_locale
from .separators import resolve_separators

EXAMPLE_AMOUNT = 1234.56


def amount_placeholder(locale: str) -> str:
    """Empty-field placeholder, e.g. "0.00" for en-US and "0,00" for de-DE."""
    return f"0{resolve_separators(locale).decimal}00"


def amount_example(locale: str) -> str:
    """``EXAMPLE_AMOUNT`` written the way *locale* writes it, two decimals."""
    try:
        return format_decimal(EXAMPLE_AMOUNT, format="#,##0.00", locale=to_babel_locale(locale))
    except (UnknownLocaleError, ValueError):
        return "1,234.56"


class NumberFormatHints:
    """Separator characters and hint strings for one locale."""

    def __init__(self, locale: str):
        self.locale = locale
        separators = resolve_separators(locale)
        self.decimal_separator = separators.decimal
        self.group_separator = separators.group

    @property
    def placeholder(self) -> str:
        return f"0{self.decimal_separator}00"

    @property
    def example(self) -> str:
        return amount_example(self.locale)
