"""Transaction records as handed to the storage collaborator."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class TransactionType(StrEnum):
    INCOME = "Income"
    EXPENSE = "Expense"


class Transaction(BaseModel):
    """A single income or expense entry.

    ``amount`` is always the canonical positive value; the direction of the
    money flow is carried by ``transaction_type``.
    """

    id: int
    description: str = ""
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}")
    transaction_type: TransactionType = TransactionType.EXPENSE
    amount: float = Field(gt=0)
