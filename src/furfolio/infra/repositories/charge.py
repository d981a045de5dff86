"""SQLModel implementation of the Charge repository."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.charge import Charge


class SQLModelChargeRepository:
    """SQLModel-based charge repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, charge_id: int) -> Optional[Charge]:
        """Retrieve a charge by ID."""
        with self.session_factory() as session:
            obj = session.get(Charge, charge_id)
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self) -> list[Charge]:
        """Return every stored charge, newest first."""
        with self.session_factory() as session:
            statement = select(Charge).order_by(Charge.occurred_at.desc())  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def filter_by_date_range(self, start_date: datetime, end_date: datetime) -> list[Charge]:
        """Get charges within an inclusive date range."""
        with self.session_factory() as session:
            statement = (
                select(Charge)
                .where(Charge.occurred_at >= start_date)
                .where(Charge.occurred_at <= end_date)
                .order_by(Charge.occurred_at.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_by_owner(self, owner_id: int) -> list[Charge]:
        """List the charges billed to one owner, newest first."""
        with self.session_factory() as session:
            statement = (
                select(Charge)
                .where(Charge.owner_id == owner_id)
                .order_by(Charge.occurred_at.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, charge: Charge) -> Charge:
        """Insert a copy of ``charge``; an explicit id is kept."""
        with self.session_factory() as session:
            row = charge.snapshot()
            session.add(row)
            session.commit()
            session.refresh(row)
            session.expunge(row)
            return row

    def update(self, charge: Charge) -> Charge:
        """Overwrite the stored charge sharing ``charge.id``."""
        if charge.id is None:
            raise ValueError("Cannot update a charge without an id")
        with self.session_factory() as session:
            if session.get(Charge, charge.id) is None:
                raise LookupError(f"Charge {charge.id} does not exist")
            row = session.merge(charge.snapshot())
            session.commit()
            session.refresh(row)
            session.expunge(row)
            return row

    def delete(self, charge_id: int) -> None:
        """Delete a charge by ID."""
        with self.session_factory() as session:
            charge = session.get(Charge, charge_id)
            if charge:
                session.delete(charge)
                session.commit()
