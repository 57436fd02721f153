"""Test effective currency selection."""
import pytest
from money_tracker.international.currency_inference import (
    get_currency_display_names, get_currency_symbol, infer_currency, narrow_symbol,
)


class TestInferCurrency:
    @pytest.mark.parametrize("locale,expected", [
        ("fr-CA", "CAD"),
        ("ja-JP", "JPY"),
        ("de-DE", "EUR"),
        ("en-GB", "GBP"),
        ("pt-BR", "BRL"),
        ("en-US", "USD"),
    ])
    def test_inferred_from_locale(self, locale, expected):
        assert infer_currency(locale, "USD") == expected

    def test_explicit_override_wins(self):
        assert infer_currency("en-US", "GBP") == "GBP"
        assert infer_currency("ja-JP", "EUR") == "EUR"

    def test_locale_is_canonicalized(self):
        assert infer_currency("fr-ca", "USD") == "CAD"
        assert infer_currency("JA_jp", "USD") == "JPY"

    def test_language_fallback(self):
        assert infer_currency("ja", "USD") == "JPY"
        assert infer_currency("de-LU", "USD") == "EUR"

    def test_unknown_locale_keeps_configured(self):
        assert infer_currency("xx-YY", "USD") == "USD"
        assert infer_currency("", "USD") == "USD"

    def test_custom_default_sentinel(self):
        # With EUR as the system default, USD counts as an explicit choice
        assert infer_currency("ja-JP", "USD", default_currency="EUR") == "USD"
        assert infer_currency("ja-JP", "EUR", default_currency="EUR") == "JPY"


class TestCurrencySymbols:
    def test_symbol(self):
        assert get_currency_symbol("EUR", "de-DE") == "€"

    def test_symbol_unknown_locale_is_code(self):
        assert get_currency_symbol("EUR", "xx-XX") == "EUR"

    def test_narrow_symbol(self):
        assert narrow_symbol("CA$") == "$"
        assert narrow_symbol("€") == "€"
        assert narrow_symbol("CHF") == "CHF"

    @pytest.mark.parametrize("symbol,expected", [
        ("US$", "$"),
        ("A$", "$"),
        ("Kč", "Kč"),
        ("Ft", "Ft"),
        ("R$", "R$"),
        ("zł", "zł"),
    ])
    def test_narrow_symbol_only_drops_prefixes(self, symbol, expected):
        assert narrow_symbol(symbol) == expected

    def test_display_names(self):
        names = get_currency_display_names("EUR", "de-DE")
        assert names["code"] == "EUR"
        assert names["english"] == "Euro"
        assert names["local"] == "Euro"

    def test_display_names_unknown_locale(self):
        names = get_currency_display_names("JPY", "xx-XX")
        assert names["english"] == "Japanese Yen"
        assert names["local"] == "JPY"
