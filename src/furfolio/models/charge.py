"""SQLModel definitions for grooming charges."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional

from sqlalchemy import CheckConstraint, DateTime
from sqlmodel import Field, SQLModel


class PaymentMethod(str, Enum):
    """How a charge was settled. ``UNPAID`` marks an open balance."""

    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    ZELLE = "zelle"
    OTHER = "other"
    UNPAID = "unpaid"

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]


_PAYMENT_LABELS = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CREDIT_CARD: "Credit Card",
    PaymentMethod.DEBIT_CARD: "Debit Card",
    PaymentMethod.ZELLE: "Zelle",
    PaymentMethod.OTHER: "Other",
    PaymentMethod.UNPAID: "Unpaid",
}


class Charge(SQLModel, table=True):
    """A billable grooming service or product sale."""

    __tablename__: ClassVar[str] = "charge"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_charge_amount_non_negative"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    # Plain DateTime: timestamps are naive local wall-clock values.
    occurred_at: datetime = Field(sa_type=DateTime, nullable=False, index=True)
    charge_type: str = Field(nullable=False, index=True, max_length=64)
    amount: float = Field(nullable=False, description="Non-negative amount in ``currency``")
    notes: Optional[str] = Field(default=None, max_length=500)
    # Opaque references owned by the client/pet records, no FK on purpose.
    owner_id: Optional[int] = Field(default=None, index=True)
    dog_id: Optional[int] = Field(default=None, index=True)
    payment_method: PaymentMethod = Field(default=PaymentMethod.UNPAID, nullable=False)
    currency: str = Field(default="USD", max_length=3, description="ISO-4217 currency code")

    @property
    def is_paid(self) -> bool:
        return self.payment_method != PaymentMethod.UNPAID

    def snapshot(self) -> "Charge":
        """Return a detached copy carrying the same field values (including ``id``)."""

        return Charge(**self.model_dump())
