"""Locales offered in the settings locale picker."""
from __future__ import annotations

import structlog
from babel import Locale, UnknownLocaleError
from babel.localedata import locale_identifiers

from ..models.formatting import LocaleItem
from ..utils.logging import EventLogger, default_event_logger

logger = structlog.get_logger(__name__)

FALLBACK_LOCALES = [
    "en-US",
    "en-CA",
    "fr-CA",
    "en-GB",
    "fr-CH",
    "fr-FR",
    "es-ES",
    "de-DE",
    "zh-CN",
    "ja-JP",
    "ko-KR",
    "hi-IN",
    "ar-SA",
    "ru-RU",
]


def _available_codes() -> list[str]:
    """Babel "language_TERRITORY" identifiers as BCP-47 tags."""
    codes = []
    for identifier in locale_identifiers():
        parts = identifier.split("_")
        if len(parts) == 2 and len(parts[1]) == 2:
            codes.append(f"{parts[0]}-{parts[1]}")
    return codes


def generate_locale_list(event_logger: EventLogger | None = None) -> list[LocaleItem]:
    """Return region-specific locales with English names, sorted by name."""
    try:
        codes = _available_codes()
    except OSError as exc:
        (event_logger or default_event_logger).log_exception(
            exc, module="locale_list", action="generate_locale_list"
        )
        codes = list(FALLBACK_LOCALES)
    if not codes:
        codes = list(FALLBACK_LOCALES)

    items = []
    for code in codes:
        try:
            name = Locale.parse(code, sep="-").get_display_name("en") or code
        except (UnknownLocaleError, ValueError):
            name = code
        items.append(LocaleItem(code=code, name=name))

    logger.debug("locale_list_generated", count=len(items))
    return sorted(items, key=lambda item: item.name.lower())
