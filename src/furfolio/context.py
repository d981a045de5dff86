"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .infra.database import create_db_engine, create_session_factory, init_database
from .infra.repositories import SQLModelChargeRepository, SQLModelExpenseRepository
from .services.audit import InMemoryEventSink
from .services.change_history import ChangeHistory
from .services.charge_ledger import ChargeLedger
from .services.reports import ReportEngine


@dataclass
class AppContext:
    """Wired services for one session (one user, one undo history)."""

    config: BaseConfig
    session_factory: Callable[[], Session]

    charge_repo: SQLModelChargeRepository
    expense_repo: SQLModelExpenseRepository

    audit_log: InMemoryEventSink
    ledger: ChargeLedger
    report_engine: ReportEngine

    @property
    def history(self) -> ChangeHistory:
        return self.ledger.history


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the engine, schema, repositories and services."""

    if config is None:
        config = BaseConfig()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)

    charge_repo = SQLModelChargeRepository(session_factory)
    expense_repo = SQLModelExpenseRepository(session_factory)
    audit_log = InMemoryEventSink(capacity=config.AUDIT_CAPACITY)

    return AppContext(
        config=config,
        session_factory=session_factory,
        charge_repo=charge_repo,
        expense_repo=expense_repo,
        audit_log=audit_log,
        ledger=ChargeLedger(charge_repo, event_sink=audit_log),
        report_engine=ReportEngine(week_start=config.WEEK_START),
    )
