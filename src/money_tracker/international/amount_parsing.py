"""Locale-aware parsing of user-typed monetary amounts.

``parse_amount`` fails closed: anything that is not unambiguously a positive
number in the locale's notation yields ``None``. It never raises for user
input.
"""
from __future__ import annotations
import math
import re
import unicodedata

from babel import UnknownLocaleError

from ..utils.logging import EventLogger, default_event_logger
from .currency_inference import DEFAULT_CURRENCY, get_currency_symbol, infer_currency, narrow_symbol
from .separators import resolve_separators

_WHITESPACE = re.compile(r"\s+")


def _strip_format_marks(text: str) -> str:
    """Remove invisible format characters such as the RLM/LRM bidi marks."""
    return "".join(ch for ch in text if unicodedata.category(ch) != "Cf")


def _strip_currency_markers(text: str, currency: str, locale: str) -> str:
    """Remove the currency's symbol, narrow symbol and ISO code from *text*."""
    symbol = get_currency_symbol(currency, locale)
    # Longest first so "US$" goes before "$"
    markers = sorted({symbol, narrow_symbol(symbol), currency, currency.upper()}, key=len, reverse=True)
    for marker in markers:
        if marker:
            text = text.replace(marker, "")
    return text.strip()


def _is_well_formed(text: str, decimal: str) -> bool:
    """Digits, one optional leading minus and decimal separators only."""
    body = text[1:] if text.startswith("-") else text
    if not body:
        return False
    return all((ch.isdigit() and ch.isascii()) or ch == decimal for ch in body)


def parse_amount(
    raw: object,
    locale: str,
    currency: str | None = None,
    *,
    event_logger: EventLogger | None = None,
) -> float | None:
    """Parse a localized amount string into a positive float.

    Returns ``None`` for empty, malformed, zero or negative input.

    - en-US: "$1,234.56" -> 1234.56
    - fr-FR: "1 234,56€" -> 1234.56
    - de-DE: "1.234,56" -> 1234.56
    """
    if not isinstance(raw, str) or not raw.strip():
        return None

    try:
        separators = resolve_separators(locale, currency)
        effective = currency or infer_currency(locale, DEFAULT_CURRENCY)

        cleaned = _strip_format_marks(raw).strip()
        if separators.group.isspace():
            # Users type a plain space where the locale uses NBSP/NNBSP.
            cleaned = _WHITESPACE.sub("", cleaned)
        else:
            cleaned = cleaned.replace(separators.group, "")

        cleaned = _strip_currency_markers(cleaned, effective, locale)
    except (UnknownLocaleError, ValueError, TypeError, LookupError) as exc:
        (event_logger or default_event_logger).log_exception(
            exc,
            module="amount_parsing",
            action="parse_amount",
            data={"raw": raw, "locale": locale},
        )
        return None

    decimal = separators.decimal
    if not _is_well_formed(cleaned, decimal):
        return None
    if cleaned.count(decimal) > 1:
        return None

    normalized = cleaned.replace(decimal, ".")
    try:
        value = float(normalized)
    except ValueError:
        return None

    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return value
