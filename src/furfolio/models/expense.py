"""SQLModel definitions for business expenses."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlalchemy import CheckConstraint, DateTime
from sqlmodel import Field, SQLModel


class Expense(SQLModel, table=True):
    """Money spent running the business (supplies, rent, fuel)."""

    __tablename__: ClassVar[str] = "expense"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_expense_amount_non_negative"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    occurred_at: datetime = Field(sa_type=DateTime, nullable=False, index=True)
    category: str = Field(nullable=False, index=True, max_length=64)
    amount: float = Field(nullable=False)
    memo: str = Field(default="", max_length=255)
