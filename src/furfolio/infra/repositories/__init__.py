"""Concrete repository implementations using SQLModel."""

from .charge import SQLModelChargeRepository
from .expense import SQLModelExpenseRepository

__all__ = [
    "SQLModelChargeRepository",
    "SQLModelExpenseRepository",
]
