"""Locale-aware formatting types shared by the parsing and display code.

``FormatPreference`` is owned by the settings layer and is read-only to the
engine. ``SeparatorSet`` is a pure derivation recomputed per locale and
currency; it is never persisted.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class CurrencyDisplay(StrEnum):
    SYMBOL = "symbol"
    CODE = "code"
    NAME = "name"
    NARROW_SYMBOL = "narrowSymbol"


class CurrencySign(StrEnum):
    STANDARD = "standard"
    ACCOUNTING = "accounting"


class DateFormatTemplate(StrEnum):
    USA = "MM/DD/YYYY"
    EUR = "DD/MM/YYYY"
    ISO = "YYYY-MM-DD"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class FormatPreference(BaseModel):
    """How monetary amounts should be displayed.

    ``min_precision`` may be left unset, in which case the formatter uses
    ``max_precision`` for both bounds.
    """

    currency_code: str = Field(default="USD", min_length=3, max_length=3)
    display_mode: CurrencyDisplay = CurrencyDisplay.SYMBOL
    sign_style: CurrencySign = CurrencySign.STANDARD
    min_precision: int | None = Field(default=None, ge=0, le=20)
    max_precision: int = Field(default=2, ge=0, le=20)
    use_grouping: bool = True

    @model_validator(mode="after")
    def _check_precision_bounds(self) -> FormatPreference:
        if self.min_precision is not None and self.min_precision > self.max_precision:
            raise ValueError(
                f"min_precision ({self.min_precision}) exceeds max_precision ({self.max_precision})"
            )
        return self


class SeparatorSet(BaseModel):
    """Characters a locale uses to write numbers and its currency symbol."""

    model_config = ConfigDict(frozen=True)

    decimal: str = "."
    group: str = ","
    currency_symbol: str = "$"


class LocaleItem(BaseModel):
    """A selectable locale with its English display name."""

    code: str
    name: str
