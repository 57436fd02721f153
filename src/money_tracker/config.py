"""Application configuration via environment variables with MONEY_TRACKER_ prefix."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from money_tracker.international.date_formatting import date_format_for_locale
from money_tracker.models.formatting import (
    CurrencyDisplay,
    CurrencySign,
    DateFormatTemplate,
    FormatPreference,
)


class Settings(BaseSettings):
    """Startup defaults for locale and money display.

    Values saved by the user in the settings screens override these; the
    engine only ever reads them.
    """

    model_config = SettingsConfigDict(env_prefix="MONEY_TRACKER_")

    # ── Locale ─────────────────────────────────────────────────────────────
    default_locale: str = "en-US"

    # ── Currency ───────────────────────────────────────────────────────────
    # Also the sentinel meaning "not overridden": while the configured
    # currency equals this value, the display currency follows the locale.
    default_currency: str = Field(default="USD", min_length=3, max_length=3)
    currency_display: CurrencyDisplay = CurrencyDisplay.SYMBOL
    currency_sign: CurrencySign = CurrencySign.STANDARD
    min_precision: int | None = Field(default=None, ge=0, le=20)
    max_precision: int = Field(default=2, ge=0, le=20)
    use_grouping: bool = True

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    def default_format_preference(self) -> FormatPreference:
        """Build the format preference used before any user override exists."""
        return FormatPreference(
            currency_code=self.default_currency,
            display_mode=self.currency_display,
            sign_style=self.currency_sign,
            min_precision=self.min_precision,
            max_precision=self.max_precision,
            use_grouping=self.use_grouping,
        )

    def default_date_format(self) -> DateFormatTemplate:
        """Date-entry template for the default locale's country."""
        return date_format_for_locale(self.default_locale)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
