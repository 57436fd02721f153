"""Transaction dates: strict ISO parsing and localized display."""
from __future__ import annotations
from datetime import date, datetime
import re

from babel import UnknownLocaleError
from babel.dates import format_date

from ..models.formatting import DateFormatTemplate
from .locales import region_of, to_babel_locale

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")

USA_FORMAT_COUNTRIES = frozenset({"US", "CA"})
EUR_FORMAT_COUNTRIES = frozenset({"GB", "DE", "FR", "CH", "ES", "IT", "RU"})


def parse_iso_date(value: str | date | None) -> date | None:
    """Parse "YYYY-MM-DD" (an optional time part is ignored).

    Each component is checked against the calendar, so "2025-02-30" is
    rejected rather than rolled over into March.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    match = _ISO_DATE.match(value.strip())
    if not match:
        return None
    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def to_iso_date_string(value: date) -> str:
    """Return the storage representation of *value*, "YYYY-MM-DD"."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_date_for_ui(value: str | date | None, locale: str) -> str:
    """Localized medium-style date, or "" when *value* is not a real date."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return ""
    try:
        return format_date(parsed, format="medium", locale=to_babel_locale(locale))
    except (UnknownLocaleError, ValueError):
        return to_iso_date_string(parsed)


def date_format_for_country(country_code: str | None) -> DateFormatTemplate:
    """Default date-entry template for a country code."""
    if not country_code:
        return DateFormatTemplate.ISO
    code = country_code.upper()
    if code in USA_FORMAT_COUNTRIES:
        return DateFormatTemplate.USA
    if code in EUR_FORMAT_COUNTRIES:
        return DateFormatTemplate.EUR
    return DateFormatTemplate.ISO


def date_format_for_locale(locale: str) -> DateFormatTemplate:
    """Default date-entry template for the region of *locale* ("en-US" -> USA)."""
    return date_format_for_country(region_of(locale))
