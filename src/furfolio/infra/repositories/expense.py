"""SQLModel implementation of the Expense repository."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from sqlmodel import Session, select

from ...models.expense import Expense


class SQLModelExpenseRepository:
    """SQLModel-based expense repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def list_all(self) -> list[Expense]:
        with self.session_factory() as session:
            statement = select(Expense).order_by(Expense.occurred_at.desc())  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def filter_by_date_range(self, start_date: datetime, end_date: datetime) -> list[Expense]:
        """Get expenses within an inclusive date range."""
        with self.session_factory() as session:
            statement = (
                select(Expense)
                .where(Expense.occurred_at >= start_date)
                .where(Expense.occurred_at <= end_date)
                .order_by(Expense.occurred_at.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, expense: Expense) -> Expense:
        with self.session_factory() as session:
            session.add(expense)
            session.commit()
            session.refresh(expense)
            session.expunge(expense)
            return expense

    def delete(self, expense_id: int) -> None:
        with self.session_factory() as session:
            expense = session.get(Expense, expense_id)
            if expense:
                session.delete(expense)
                session.commit()
