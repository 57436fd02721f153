"""Test running totals."""
from money_tracker.ledger import balance, next_transaction_id, total_expense, total_income
from money_tracker.models.transaction import TransactionType
from tests.factories import make_transaction


def _sample():
    return [
        make_transaction(1, 1000.10, TransactionType.INCOME),
        make_transaction(2, 0.1, TransactionType.EXPENSE),
        make_transaction(3, 0.2, TransactionType.EXPENSE),
        make_transaction(7, 250.0, TransactionType.INCOME),
    ]


class TestLedger:
    def test_totals(self):
        assert total_income(_sample()) == 1250.10
        assert total_expense(_sample()) == 0.3

    def test_balance(self):
        assert balance(_sample()) == 1249.8

    def test_empty(self):
        assert balance([]) == 0
        assert next_transaction_id([]) == 1

    def test_balance_accepts_generator(self):
        assert balance(t for t in _sample()) == 1249.8

    def test_next_id(self):
        assert next_transaction_id(_sample()) == 8
