"""Repository protocol definitions for domain layer."""

from .charge import ChargeRepository
from .expense import ExpenseRepository

__all__ = [
    "ChargeRepository",
    "ExpenseRepository",
]
