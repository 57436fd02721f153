"""Test the transaction record model."""
import pytest
from pydantic import ValidationError

from money_tracker.models.transaction import Transaction, TransactionType


class TestTransaction:
    def test_valid(self):
        tx = Transaction(id=1, date="2026-03-01", amount=12.5, transaction_type="Income")
        assert tx.transaction_type == TransactionType.INCOME
        assert tx.description == ""

    @pytest.mark.parametrize("amount", [0, -1.5])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            Transaction(id=1, date="2026-03-01", amount=amount)

    def test_date_must_be_iso(self):
        with pytest.raises(ValidationError):
            Transaction(id=1, date="03/01/2026", amount=1)
