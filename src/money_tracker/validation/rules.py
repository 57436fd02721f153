"""Form validation rules.

Each rule takes the field value and returns ``True`` when it is acceptable or
a user-facing message when it is not. Rules never raise for bad input.
"""
from __future__ import annotations
from collections.abc import Callable
from datetime import date
import math
import re
from typing import Any

from ..i18n.messages import Translator, default_translator
from ..international.amount_parsing import parse_amount
from ..international.format_hints import amount_example
from ..international.date_formatting import parse_iso_date
from ..international.separators import decimal_separator
from ..utils.logging import EventLogger, default_event_logger

Rule = Callable[[Any], "bool | str"]


def _message(translator: Translator | None, key: str, **params: Any) -> str:
    return (translator or default_translator).translate(key, **params)


def required(value: Any, *, translator: Translator | None = None) -> bool | str:
    """Fail on falsy values, including 0."""
    if value:
        return True
    return _message(translator, "validation.required")


def required_zero_ok(value: Any, *, translator: Translator | None = None) -> bool | str:
    """Like ``required`` but a numeric 0 is an acceptable answer."""
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return True
    return required(value, translator=translator)


def transaction_type_required(value: Any, *, translator: Translator | None = None) -> bool | str:
    if value:
        return True
    return _message(translator, "validation.transaction_type_required")


def date_rule(
    value: str | date | None,
    *,
    today: date | None = None,
    translator: Translator | None = None,
    event_logger: EventLogger | None = None,
) -> bool | str:
    """Transaction dates must be real, not in the future, and in this year."""
    if not value:
        return _message(translator, "validation.date_required")

    parsed = parse_iso_date(value)
    if parsed is None:
        (event_logger or default_event_logger).log_warning(
            "Invalid date entered",
            module="validation",
            action="date_rule",
            data={"value": str(value)},
        )
        return _message(translator, "validation.date_invalid")

    today = today or date.today()
    if parsed > today:
        return _message(translator, "validation.date_future")
    if parsed.year != today.year:
        return _message(translator, "validation.date_previous_year", year=today.year)
    return True


def has_correct_separator(value: str | None, locale: str) -> bool:
    """False when *value* ends in the other locale's decimal separator.

    "12.50" is wrong for de-DE and "12,50" is wrong for en-US. Values with
    no "." or "," at all are accepted.
    """
    if not value or ("." not in value and "," not in value):
        return True
    wrong = "." if decimal_separator(locale) == "," else ","
    return re.search(re.escape(wrong) + r"\d{1,2}$", value.strip()) is None


def amount_rule(
    value: str | None,
    locale: str,
    *,
    currency: str | None = None,
    translator: Translator | None = None,
    event_logger: EventLogger | None = None,
) -> bool | str:
    """The amount must use the locale's notation and be greater than zero."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return _message(translator, "validation.amount_required")

    if isinstance(value, str) and not has_correct_separator(value, locale):
        return _message(
            translator,
            "validation.amount_wrong_separator",
            separator=decimal_separator(locale),
            example=amount_example(locale),
        )

    parsed = parse_amount(value, locale, currency, event_logger=event_logger)
    if parsed is None or parsed <= 0:
        return _message(translator, "validation.amount_positive")
    return True


def bounded_integer_rule(
    value: Any,
    min_value: int,
    max_value: int,
    *,
    translator: Translator | None = None,
) -> bool | str:
    """Whole numbers within ``[min_value, max_value]``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return _message(translator, "validation.integer_required")

    try:
        number = float(value)
    except (TypeError, ValueError):
        return _message(translator, "validation.integer_not_numeric")
    if isinstance(value, bool) or math.isnan(number):
        return _message(translator, "validation.integer_not_numeric")

    if number < min_value or number > max_value:
        return _message(translator, "validation.integer_out_of_range", min=min_value, max=max_value)
    if not number.is_integer():
        return _message(translator, "validation.integer_not_whole")
    return True


class ValidationRules:
    """Rules bound to one locale, translator and clock, grouped per form field."""

    def __init__(
        self,
        locale: str,
        *,
        currency: str | None = None,
        translator: Translator | None = None,
        event_logger: EventLogger | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.locale = locale
        self.currency = currency
        self.translator = translator
        self.event_logger = event_logger
        self._today = today

    def required(self, value: Any) -> bool | str:
        return required(value, translator=self.translator)

    def required_zero_ok(self, value: Any) -> bool | str:
        return required_zero_ok(value, translator=self.translator)

    def transaction_type(self, value: Any) -> bool | str:
        return transaction_type_required(value, translator=self.translator)

    def date(self, value: str | date | None) -> bool | str:
        return date_rule(
            value, today=self._today(), translator=self.translator, event_logger=self.event_logger
        )

    def amount(self, value: str | None) -> bool | str:
        return amount_rule(
            value,
            self.locale,
            currency=self.currency,
            translator=self.translator,
            event_logger=self.event_logger,
        )

    def bounded_integer(self, min_value: int, max_value: int) -> Rule:
        return lambda value: bounded_integer_rule(value, min_value, max_value, translator=self.translator)

    @property
    def fields(self) -> dict[str, list[Rule]]:
        return {
            "date": [self.required, self.date],
            "amount": [self.required, self.amount],
            "category": [self.required],
            "transaction_type": [self.transaction_type],
        }

    def validate(self, field: str, value: Any) -> list[str]:
        """Messages from every failing rule for *field*, in rule order."""
        messages = []
        for rule in self.fields[field]:
            result = rule(value)
            if result is not True:
                messages.append(result)
        return messages
