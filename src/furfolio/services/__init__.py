"""Service module exports."""

from . import (
    audit,
    change_history,
    charge_ledger,
    charge_summary,
    periods,
    reports,
)

__all__ = [
    "audit",
    "change_history",
    "charge_ledger",
    "charge_summary",
    "periods",
    "reports",
]
