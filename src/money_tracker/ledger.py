"""Running totals over a list of transactions."""
from __future__ import annotations
from collections.abc import Iterable

from .models.transaction import Transaction, TransactionType


def _total(transactions: Iterable[Transaction], kind: TransactionType) -> float:
    return round(sum(t.amount for t in transactions if t.transaction_type == kind), 2)


def total_income(transactions: Iterable[Transaction]) -> float:
    return _total(transactions, TransactionType.INCOME)


def total_expense(transactions: Iterable[Transaction]) -> float:
    return _total(transactions, TransactionType.EXPENSE)


def balance(transactions: Iterable[Transaction]) -> float:
    """Income minus expenses, rounded to cents."""
    items = list(transactions)
    return round(total_income(items) - total_expense(items), 2)


def next_transaction_id(transactions: Iterable[Transaction]) -> int:
    """One past the highest id in use, starting at 1."""
    return max((t.id for t in transactions), default=0) + 1
