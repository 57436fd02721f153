"""BCP-47 locale tag helpers."""
from __future__ import annotations
import re

from babel import Locale

_SUBTAG_SPLIT = re.compile(r"[-_]")


def canonicalize_locale(tag: str) -> str:
    """Recase a locale tag: language lower, script title, region upper.

    "fr-ca" -> "fr-CA", "en_us" -> "en-US", "zh-hant-tw" -> "zh-Hant-TW".
    """
    parts = [p for p in _SUBTAG_SPLIT.split(tag.strip()) if p]
    if not parts:
        return ""
    canonical = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            canonical.append(part.title())
        else:
            canonical.append(part.upper())
    return "-".join(canonical)


def language_of(tag: str) -> str:
    """Return the lowercase language subtag of *tag*."""
    canonical = canonicalize_locale(tag)
    return canonical.split("-", 1)[0]


def region_of(tag: str) -> str | None:
    """Return the uppercase region subtag of *tag*, if it has one."""
    for part in canonicalize_locale(tag).split("-")[1:]:
        if len(part) in (2, 3) and part.isalnum():
            return part
    return None


def to_babel_locale(tag: str) -> Locale:
    """Parse *tag* into a Babel ``Locale``.

    Raises ``babel.UnknownLocaleError`` for locales without CLDR data and
    ``ValueError`` for malformed tags.
    """
    canonical = canonicalize_locale(tag)
    if not canonical:
        raise ValueError(f"Empty locale tag: {tag!r}")
    return Locale.parse(canonical, sep="-")
