"""Message catalog for validation rules.

Rules return either the translated text or, when no translator is supplied,
the English text from ``ENGLISH_MESSAGES``.
"""

from __future__ import annotations

from typing import Any, Protocol

ENGLISH_MESSAGES: dict[str, str] = {
    "validation.required": "This field is required.",
    "validation.transaction_type_required": "Transaction Type must be chosen",
    "validation.date_required": "Date is required.",
    "validation.date_invalid": "Please enter a valid date.",
    "validation.date_future": "Transaction date cannot be in the future (tomorrow or later).",
    "validation.date_previous_year": "Transaction date cannot be from a previous calendar year ({year}).",
    "validation.amount_required": "Amount is required.",
    "validation.amount_wrong_separator": "Please use '{separator}' as the decimal separator (e.g. {example}).",
    "validation.amount_positive": "Amount must be supplied and must be greater than zero",
    "validation.integer_required": "Please enter a value.",
    "validation.integer_not_numeric": "Please enter a number.",
    "validation.integer_not_whole": "Please enter a whole number.",
    "validation.integer_out_of_range": "Please enter a value between {min} and {max}.",
}


class Translator(Protocol):
    def translate(self, key: str, **params: Any) -> str: ...


class CatalogTranslator:
    """Translator backed by an in-memory catalog.

    Keys missing from the catalog are returned unchanged, so a translation key
    can never surface as an exception in a form.
    """

    def __init__(self, catalog: dict[str, str] | None = None):
        self._catalog = catalog if catalog is not None else ENGLISH_MESSAGES

    def translate(self, key: str, **params: Any) -> str:
        template = self._catalog.get(key)
        if template is None:
            return key
        try:
            return template.format(**params)
        except (KeyError, IndexError):
            return template


default_translator = CatalogTranslator()
