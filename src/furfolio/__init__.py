"""Furfolio charge history and financial reporting."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .context import create_app_context
from .services.change_history import AddCharge, ChangeHistory, DeleteCharge, EditCharge
from .services.periods import DateRange, Period
from .services.reports import FinancialReport, ReportEngine, ReportLineItem, generate_report

__all__ = [
    "AddCharge",
    "BaseConfig",
    "ChangeHistory",
    "DateRange",
    "DeleteCharge",
    "DevConfig",
    "EditCharge",
    "FinancialReport",
    "Period",
    "ReportEngine",
    "ReportLineItem",
    "create_app_context",
    "generate_report",
]
