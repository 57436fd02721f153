"""Render canonical amounts as localized currency strings."""
from __future__ import annotations
import math
import re
from decimal import InvalidOperation

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    UnknownCurrencyError,
    UnknownCurrencyFormatError,
    format_currency,
    validate_currency,
)

from ..models.formatting import CurrencyDisplay, CurrencySign, FormatPreference
from ..utils.logging import EventLogger, default_event_logger
from .currency_inference import DEFAULT_CURRENCY, get_currency_symbol, infer_currency, narrow_symbol
from .locales import to_babel_locale

_FORMATTER_ERRORS = (
    UnknownLocaleError,
    UnknownCurrencyError,
    UnknownCurrencyFormatError,
    InvalidOperation,
    ValueError,
    KeyError,
    TypeError,
)

# Integer part of a number pattern plus its optional fraction, e.g. "#,##0.00"
_NUMBER_BODY = re.compile(r"([#,0]*0)(?:\.[0#]*)?")


def _with_precision(pattern: str, min_precision: int, max_precision: int) -> str:
    """Rewrite every fraction in *pattern* to show min..max digits."""
    if max_precision == 0:
        fraction = ""
    else:
        fraction = "." + "0" * min_precision + "#" * (max_precision - min_precision)
    return _NUMBER_BODY.sub(lambda m: m.group(1) + fraction, pattern)


def _with_code(pattern: str) -> str:
    """Swap the symbol placeholder for the ISO code, spaced from the digits."""
    pattern = re.sub(r"¤(?=[#0])", "\x00\u00a0", pattern)
    pattern = re.sub(r"(?<=[#0])¤", "\u00a0\x00", pattern)
    return pattern.replace("¤", "\x00").replace("\x00", "¤¤")


def _currency_pattern(loc: Locale, sign_style: CurrencySign) -> str:
    if sign_style == CurrencySign.ACCOUNTING:
        accounting = loc.currency_formats.get("accounting")
        if accounting is not None:
            return accounting.pattern
    return loc.currency_formats["standard"].pattern


def fallback_format(amount: float, currency: str, max_precision: int) -> str:
    """Locale-independent rendering: "<CODE> <amount fixed to max_precision>"."""
    return f"{currency} {amount:.{max_precision}f}"


def format_amount(
    amount: float | None,
    locale: str,
    prefs: FormatPreference,
    *,
    default_currency: str = DEFAULT_CURRENCY,
    event_logger: EventLogger | None = None,
) -> str:
    """Format *amount* for display in *locale* according to *prefs*.

    ``None`` and non-finite amounts render as an empty string. If Babel
    rejects the locale or the currency, the fallback rendering is returned
    and the failure is logged once.
    """
    if amount is None or not math.isfinite(amount):
        return ""

    currency = infer_currency(locale, prefs.currency_code, default_currency)
    min_precision = prefs.min_precision if prefs.min_precision is not None else prefs.max_precision

    try:
        loc = to_babel_locale(locale)
        validate_currency(currency)

        if prefs.display_mode == CurrencyDisplay.NAME:
            pattern = _with_precision(loc.decimal_formats[None].pattern, min_precision, prefs.max_precision)
            return format_currency(
                amount,
                currency,
                format=pattern,
                locale=loc,
                currency_digits=False,
                format_type="name",
                group_separator=prefs.use_grouping,
            )

        pattern = _with_precision(
            _currency_pattern(loc, prefs.sign_style), min_precision, prefs.max_precision
        )
        if prefs.display_mode == CurrencyDisplay.CODE:
            pattern = _with_code(pattern)

        text = format_currency(
            amount,
            currency,
            format=pattern,
            locale=loc,
            currency_digits=False,
            group_separator=prefs.use_grouping,
        )
        if prefs.display_mode == CurrencyDisplay.NARROW_SYMBOL:
            symbol = get_currency_symbol(currency, locale)
            text = text.replace(symbol, narrow_symbol(symbol), 1)
        return text
    except _FORMATTER_ERRORS as exc:
        (event_logger or default_event_logger).log_exception(
            exc,
            module="amount_formatting",
            action="format_amount",
            data={"locale": locale, "currency": currency, "amount": amount},
        )
        return fallback_format(amount, currency, prefs.max_precision)
