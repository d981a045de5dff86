"""Undo/redo history for charge mutations.

The history only keeps the log and computes inverses. Applying a returned
change to the record store is the caller's job (see ``charge_ledger``).
Instances are not thread-safe; serialize access when sharing one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..logging_config import get_logger
from ..models.charge import Charge
from .audit import EventSink, HistoryEvent, NullEventSink

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AddCharge:
    charge: Charge

    def inverse(self) -> "DeleteCharge":
        return DeleteCharge(self.charge)


@dataclass(frozen=True, slots=True)
class EditCharge:
    old: Charge
    new: Charge

    def inverse(self) -> "EditCharge":
        return EditCharge(old=self.new, new=self.old)


@dataclass(frozen=True, slots=True)
class DeleteCharge:
    charge: Charge

    def inverse(self) -> AddCharge:
        return AddCharge(self.charge)


ChargeChange = Union[AddCharge, EditCharge, DeleteCharge]


def _label(charge: Charge) -> str:
    return f"{charge.charge_type}, ${float(charge.amount):.2f}"


def describe_change(change: ChargeChange) -> str:
    """Short human-readable description, e.g. ``Add [Bath, $25.00]``."""

    if isinstance(change, AddCharge):
        return f"Add [{_label(change.charge)}]"
    if isinstance(change, DeleteCharge):
        return f"Delete [{_label(change.charge)}]"
    return f"Edit [{_label(change.old)} -> {_label(change.new)}]"


class ChangeHistory:
    """Linear undo/redo stacks of ``ChargeChange`` entries."""

    def __init__(self, event_sink: EventSink | None = None) -> None:
        self.event_sink: EventSink = event_sink if event_sink is not None else NullEventSink()
        self.undo_stack: list[ChargeChange] = []
        self.redo_stack: list[ChargeChange] = []

    # -- recording -----------------------------------------------------

    def record(self, change: ChargeChange) -> None:
        """Push ``change`` and drop any redo entries it invalidates."""

        self.undo_stack.append(change)
        self.redo_stack.clear()
        operation = {
            AddCharge: "record_add",
            EditCharge: "record_edit",
            DeleteCharge: "record_delete",
        }[type(change)]
        self._emit(operation, change, "Recorded change")

    def record_add(self, charge: Charge) -> None:
        self.record(AddCharge(charge))

    def record_edit(self, old: Charge, new: Charge) -> None:
        self.record(EditCharge(old=old, new=new))

    def record_delete(self, charge: Charge) -> None:
        self.record(DeleteCharge(charge))

    # -- undo / redo ---------------------------------------------------

    def undo(self) -> Optional[ChargeChange]:
        """Pop the last change and return its inverse, or ``None`` if empty."""

        if not self.undo_stack:
            logger.info("Nothing to undo")
            self._emit("undo", None, "Nothing to undo")
            return None
        change = self.undo_stack.pop()
        self.redo_stack.append(change)
        self._emit("undo", change, "Undo performed")
        return change.inverse()

    def redo(self) -> Optional[ChargeChange]:
        """Move the last undone change back and return it unchanged."""

        if not self.redo_stack:
            logger.info("Nothing to redo")
            self._emit("redo", None, "Nothing to redo")
            return None
        change = self.redo_stack.pop()
        self.undo_stack.append(change)
        self._emit("redo", change, "Redo performed")
        return change

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
        self._emit("clear", None, "Cleared all undo/redo history")

    def peek_undo(self) -> Optional[ChargeChange]:
        return self.undo_stack[-1] if self.undo_stack else None

    def peek_redo(self) -> Optional[ChargeChange]:
        return self.redo_stack[-1] if self.redo_stack else None

    # -- state ---------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self.undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self.redo_stack)

    def _emit(self, operation: str, change: Optional[ChargeChange], detail: str) -> None:
        description = describe_change(change) if change is not None else None
        logger.debug(
            "History %s",
            operation,
            extra={"change": description, "undo_depth": self.undo_depth, "redo_depth": self.redo_depth},
        )
        self.event_sink.record(
            HistoryEvent(
                operation=operation,
                change_description=description,
                undo_depth=self.undo_depth,
                redo_depth=self.redo_depth,
                detail=detail,
            )
        )
