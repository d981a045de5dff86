"""Expense repository protocol."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ...models.expense import Expense


class ExpenseRepository(Protocol):
    """Record store for expenses."""

    def list_all(self) -> list[Expense]:
        ...

    def filter_by_date_range(self, start_date: datetime, end_date: datetime) -> list[Expense]:
        ...

    def create(self, expense: Expense) -> Expense:
        ...

    def delete(self, expense_id: int) -> None:
        ...
