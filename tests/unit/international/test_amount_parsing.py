"""Test locale-aware amount parsing."""
import pytest
from money_tracker.international import amount_parsing
from money_tracker.international.amount_parsing import parse_amount


class TestRejection:
    @pytest.mark.parametrize("raw", ["", "   ", "0", "0.00", "-5", "-10.50", "12.34.56", "12a", "abc", "1e5", "--5", "5-", "nan", "inf", "$", "."])
    def test_rejected_en_us(self, raw):
        assert parse_amount(raw, "en-US") is None

    @pytest.mark.parametrize("raw", [None, 123, 12.5, ["1"], b"12"])
    def test_non_string_rejected(self, raw):
        assert parse_amount(raw, "en-US") is None

    def test_stray_punctuation_rejected(self):
        assert parse_amount("12;50", "en-US") is None
        assert parse_amount("12/50", "de-DE") is None

    def test_multiple_decimals_de(self):
        assert parse_amount("1,2,3", "de-DE") is None


class TestUsLocale:
    def test_plain(self):
        assert parse_amount("12.34", "en-US") == 12.34

    def test_integer(self):
        assert parse_amount("1234", "en-US") == 1234

    def test_thousands(self):
        assert parse_amount("1,234.56", "en-US") == 1234.56
        assert parse_amount("100,000", "en-US") == 100000

    def test_symbol(self):
        assert parse_amount("$1,234.56", "en-US") == 1234.56

    def test_surrounding_whitespace(self):
        assert parse_amount(" $12.50 ", "en-US") == 12.50

    def test_iso_code(self):
        assert parse_amount("USD 12.50", "en-US") == 12.50


class TestEuropeanLocales:
    def test_french(self):
        assert parse_amount("1 234,56€", "fr-FR") == 1234.56

    def test_french_narrow_no_break_space(self):
        assert parse_amount("1\u202f234,56\u00a0€", "fr-FR") == 1234.56

    def test_german(self):
        assert parse_amount("1.234,56", "de-DE") == 1234.56

    def test_german_with_symbol(self):
        assert parse_amount("1.234,56 €", "de-DE") == 1234.56

    def test_german_large(self):
        assert parse_amount("12.345.678,90", "de-DE") == 12345678.90

    def test_british_pound(self):
        assert parse_amount("£99.99", "en-GB") == 99.99

    def test_explicit_currency(self):
        assert parse_amount("CHF 12.50", "en-US", "CHF") == 12.50

    def test_bidi_marks_ignored(self):
        assert parse_amount("\u200f1,234.56\u00a0ر.س.\u200f", "ar-SA") == 1234.56
        assert parse_amount("\u200e12.50", "en-US") == 12.50


class TestFailureHandling:
    def test_unknown_locale_uses_us_separators(self):
        assert parse_amount("1,234.56", "xx-XX") == 1234.56

    def test_platform_failure_is_logged_and_returns_none(self, monkeypatch, event_logger):
        def broken(*args, **kwargs):
            raise ValueError("formatter unavailable")

        monkeypatch.setattr(amount_parsing, "resolve_separators", broken)
        assert parse_amount("12.50", "en-US", event_logger=event_logger) is None
        assert len(event_logger.exceptions) == 1
        report = event_logger.exceptions[0]
        assert report["module"] == "amount_parsing"
        assert report["action"] == "parse_amount"
        assert report["data"] == {"raw": "12.50", "locale": "en-US"}

    def test_malformed_input_is_not_logged(self, event_logger):
        assert parse_amount("12a", "en-US", event_logger=event_logger) is None
        assert event_logger.exceptions == []
