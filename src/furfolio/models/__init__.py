"""SQLModel table exports."""

from .charge import Charge, PaymentMethod
from .expense import Expense

__all__ = [
    "Charge",
    "Expense",
    "PaymentMethod",
]
