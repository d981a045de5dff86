"""Charge persistence with undo/redo.

``ChargeLedger`` is the caller side of ``ChangeHistory``: it writes to the
repository, records what it did, and applies the changes handed back by
undo/redo.
"""

from __future__ import annotations

from typing import Any, Optional

from ..domain.repositories import ChargeRepository
from ..logging_config import get_logger
from ..models.charge import Charge
from .audit import EventSink
from .change_history import (
    AddCharge,
    ChangeHistory,
    ChargeChange,
    DeleteCharge,
    EditCharge,
    describe_change,
)

logger = get_logger(__name__)

EDITABLE_FIELDS = frozenset(
    {"occurred_at", "charge_type", "amount", "notes", "owner_id", "dog_id", "payment_method", "currency"}
)


def validate_charge(charge: Charge) -> None:
    """Reject values the store should never see."""

    if charge.amount is None or charge.amount < 0:
        raise ValueError(f"Charge amount must be non-negative, got {charge.amount!r}")
    if not (charge.charge_type or "").strip():
        raise ValueError("Charge type is required")
    if charge.occurred_at is None:
        raise ValueError("Charge date is required")


def apply_change(repository: ChargeRepository, change: ChargeChange) -> Optional[Charge]:
    """Apply one change to the store; returns the stored row when there is one."""

    if isinstance(change, AddCharge):
        return repository.create(change.charge)
    if isinstance(change, DeleteCharge):
        if change.charge.id is not None:
            repository.delete(change.charge.id)
        return None
    if isinstance(change, EditCharge):
        return repository.update(change.new)
    raise TypeError(f"Unsupported change: {change!r}")


class ChargeLedger:
    """Add, edit and delete charges while keeping an undo/redo trail."""

    def __init__(
        self,
        repository: ChargeRepository,
        *,
        history: ChangeHistory | None = None,
        event_sink: EventSink | None = None,
    ) -> None:
        self.repository = repository
        self.history = history if history is not None else ChangeHistory(event_sink=event_sink)

    def add(self, charge: Charge) -> Charge:
        validate_charge(charge)
        stored = self.repository.create(charge)
        self.history.record_add(stored.snapshot())
        logger.info("Charge added", extra={"charge_id": stored.id, "amount": stored.amount})
        return stored

    def edit(self, charge_id: int, **fields: Any) -> Charge:
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot edit charge fields: {', '.join(sorted(unknown))}")
        current = self._require(charge_id)
        old = current.snapshot()
        updated = current.snapshot()
        for name, value in fields.items():
            setattr(updated, name, value)
        validate_charge(updated)
        stored = self.repository.update(updated)
        self.history.record_edit(old, stored.snapshot())
        logger.info("Charge edited", extra={"charge_id": charge_id, "fields": sorted(fields)})
        return stored

    def delete(self, charge_id: int) -> Charge:
        removed = self._require(charge_id).snapshot()
        self.repository.delete(charge_id)
        self.history.record_delete(removed)
        logger.info("Charge deleted", extra={"charge_id": charge_id})
        return removed

    def undo(self) -> Optional[ChargeChange]:
        """Revert the latest change in the store; ``None`` when nothing to undo."""

        change = self.history.undo()
        if change is not None:
            apply_change(self.repository, change)
            logger.info("Undo applied", extra={"change": describe_change(change)})
        return change

    def redo(self) -> Optional[ChargeChange]:
        change = self.history.redo()
        if change is not None:
            apply_change(self.repository, change)
            logger.info("Redo applied", extra={"change": describe_change(change)})
        return change

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def _require(self, charge_id: int) -> Charge:
        charge = self.repository.get_by_id(charge_id)
        if charge is None:
            raise LookupError(f"Charge {charge_id} not found")
        return charge
