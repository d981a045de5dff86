"""Charge repository protocol."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ...models.charge import Charge


class ChargeRepository(Protocol):
    """Record store for charges."""

    def get_by_id(self, charge_id: int) -> Optional[Charge]:
        """Retrieve a charge by ID."""
        ...

    def list_all(self) -> list[Charge]:
        """Return every stored charge, newest first."""
        ...

    def filter_by_date_range(self, start_date: datetime, end_date: datetime) -> list[Charge]:
        """Get charges within an inclusive date range."""
        ...

    def list_by_owner(self, owner_id: int) -> list[Charge]:
        """List the charges billed to one owner, newest first."""
        ...

    def create(self, charge: Charge) -> Charge:
        """Insert a charge, keeping its id when one is set."""
        ...

    def update(self, charge: Charge) -> Charge:
        """Overwrite the stored charge sharing ``charge.id``."""
        ...

    def delete(self, charge_id: int) -> None:
        """Delete a charge by ID."""
        ...
