"""Derive a locale's number separators by formatting a probe value.

Resolution never fails: when Babel cannot handle the locale, or the probe
comes back without both markers, US-style characters are used instead.
"""
from __future__ import annotations
import unicodedata

from babel import UnknownLocaleError
from babel.numbers import format_decimal

from ..models.formatting import SeparatorSet
from .currency_inference import DEFAULT_CURRENCY, get_currency_symbol, infer_currency
from .locales import to_babel_locale

FALLBACK_SEPARATORS = SeparatorSet(decimal=".", group=",", currency_symbol="$")

# Seven integer digits so locales with a minimum grouping of two (es, pl)
# still show a group separator.
PROBE_NUMBER = 1111111.11


def _probe_separators(locale: str) -> tuple[str, str] | None:
    try:
        formatted = format_decimal(PROBE_NUMBER, format="#,##0.00", locale=to_babel_locale(locale))
    except (UnknownLocaleError, ValueError):
        return None

    markers = [ch for ch in formatted if not ch.isdigit() and unicodedata.category(ch) != "Cf"]
    if len(markers) < 2:
        return None
    group, decimal = markers[0], markers[-1]
    if group == decimal:
        return None
    return decimal, group


def resolve_separators(locale: str, currency: str | None = None) -> SeparatorSet:
    """Return the decimal/group characters and currency symbol for *locale*.

    *currency* defaults to the currency inferred from the locale.
    """
    probed = _probe_separators(locale)
    if probed is None:
        return FALLBACK_SEPARATORS

    decimal, group = probed
    effective = currency or infer_currency(locale, DEFAULT_CURRENCY)
    symbol = get_currency_symbol(effective, locale)
    return SeparatorSet(decimal=decimal, group=group, currency_symbol=symbol)


def decimal_separator(locale: str) -> str:
    return resolve_separators(locale).decimal


def group_separator(locale: str) -> str:
    return resolve_separators(locale).group
