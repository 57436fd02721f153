"""Pick the currency an amount should be displayed in."""
from __future__ import annotations
import re

from babel import UnknownLocaleError
from babel.numbers import get_currency_name
from babel.numbers import get_currency_symbol as _babel_currency_symbol

from .locales import canonicalize_locale, language_of, to_babel_locale

DEFAULT_CURRENCY = "USD"

# Latin prefix that only disambiguates a shared sign: "US$", "CA$", "A$"
_DISAMBIGUATING_PREFIX = re.compile(r"[A-Z]{1,3}([^\w\s]+)")

# Letter-bearing signs that are the currency's own everyday symbol
_NATIVE_SIGNS = frozenset({"R$", "S/", "B/."})

# Locale -> currency used when the user has not chosen a currency explicitly
LOCALE_CURRENCY_MAP: dict[str, str] = {
    "en-US": "USD",
    "en-CA": "CAD",
    "fr-CA": "CAD",
    "es-MX": "MXN",
    "fr-FR": "EUR",
    "fr-CH": "CHF",
    "de-CH": "CHF",
    "de-DE": "EUR",
    "de-AT": "EUR",
    "es-ES": "EUR",
    "it-IT": "EUR",
    "nl-NL": "EUR",
    "pt-PT": "EUR",
    "en-IE": "EUR",
    "en-GB": "GBP",
    "ru-RU": "RUB",
    "ja-JP": "JPY",
    "zh-CN": "CNY",
    "zh-TW": "TWD",
    "ko-KR": "KRW",
    "en-IN": "INR",
    "hi-IN": "INR",
    "id-ID": "IDR",
    "en-AU": "AUD",
    "en-NZ": "NZD",
    "th-TH": "THB",
    "ar-SA": "SAR",
    "ar-EG": "EGP",
    "pt-BR": "BRL",
    "es-AR": "ARS",
    "sv-SE": "SEK",
    "nb-NO": "NOK",
    "da-DK": "DKK",
    "pl-PL": "PLN",
    "cs-CZ": "CZK",
    "hu-HU": "HUF",
    "tr-TR": "TRY",
    # Languages spoken mainly under a single currency
    "ja": "JPY",
    "ko": "KRW",
    "ru": "RUB",
    "th": "THB",
    "id": "IDR",
    "hi": "INR",
    "de": "EUR",
    "it": "EUR",
    "nl": "EUR",
    "pl": "PLN",
    "sv": "SEK",
    "cs": "CZK",
    "hu": "HUF",
    "tr": "TRY",
}


def infer_currency(
    locale: str,
    configured_currency: str,
    default_currency: str = DEFAULT_CURRENCY,
) -> str:
    """Return the effective display currency.

    An explicit choice (anything other than *default_currency*) always wins.
    Otherwise the locale decides: full tag first, then its language, then the
    configured value.
    """
    if configured_currency != default_currency:
        return configured_currency

    canonical = canonicalize_locale(locale or "")
    inferred = LOCALE_CURRENCY_MAP.get(canonical)
    if inferred is None and canonical:
        inferred = LOCALE_CURRENCY_MAP.get(language_of(canonical))
    return inferred or configured_currency


def get_currency_symbol(currency: str, locale: str) -> str:
    """Localized currency symbol, or the code itself if it cannot be resolved."""
    try:
        return _babel_currency_symbol(currency, locale=to_babel_locale(locale))
    except (UnknownLocaleError, ValueError):
        return currency


def narrow_symbol(symbol: str) -> str:
    """Drop disambiguating letters from a symbol: "US$" -> "$", "CA$" -> "$".

    Symbols that are words ("Kč", "Ft", "CHF") are returned unchanged.
    """
    if symbol in _NATIVE_SIGNS:
        return symbol
    match = _DISAMBIGUATING_PREFIX.fullmatch(symbol)
    return match.group(1) if match else symbol


def get_currency_display_names(currency: str, locale: str) -> dict[str, str]:
    """Return the currency code with its English and localized names."""
    english = get_currency_name(currency, locale="en")
    try:
        local = get_currency_name(currency, locale=to_babel_locale(locale))
    except (UnknownLocaleError, ValueError):
        local = currency
    return {"code": currency, "english": english or currency, "local": local or currency}
