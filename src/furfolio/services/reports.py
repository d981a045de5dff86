"""Financial report generation for charges and expenses."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Sequence

from ..logging_config import get_logger
from ..models.charge import Charge
from ..models.expense import Expense
from .periods import (
    MONDAY,
    DateRange,
    Period,
    PeriodLike,
    coerce_period,
    parse_week_start,
    resolve_period,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..domain.repositories import ChargeRepository, ExpenseRepository

logger = get_logger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
UNCATEGORIZED = "Uncategorized"


def to_money(value: float | int | str | Decimal) -> Decimal:
    """Convert a stored amount to ``Decimal`` cents (ROUND_HALF_UP)."""

    if not isinstance(value, Decimal):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class ReportLineItem:
    """A (category, summed amount) pair in a breakdown."""

    category: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class FinancialReport:
    """Profit and loss summary for one period."""

    period: DateRange
    label: str
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: Decimal
    revenue_breakdown: tuple[ReportLineItem, ...]
    expense_breakdown: tuple[ReportLineItem, ...]

    @property
    def report_title(self) -> str:
        return f"{self.label} Financial Report"

    @property
    def is_profitable(self) -> bool:
        return self.net_profit > 0


def build_breakdown(pairs: Iterable[tuple[str, float]]) -> list[ReportLineItem]:
    """Group ``(category, amount)`` pairs, biggest first, ties by name."""

    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for category, amount in pairs:
        totals[(category or "").strip() or UNCATEGORIZED] += to_money(amount)
    items = [ReportLineItem(category=name, amount=total) for name, total in totals.items()]
    items.sort(key=lambda item: (-item.amount, item.category))
    return items


def profit_margin(revenue: Decimal, net: Decimal) -> Decimal:
    """Net profit as a percentage of revenue; 0 when there is no revenue."""

    if revenue <= 0:
        return ZERO
    return (net / revenue * 100).quantize(CENT, rounding=ROUND_HALF_UP)


class ReportEngine:
    """Stateless report builder.

    ``week_start`` pins the first day of the ``week`` period (0 = Monday) so
    results never depend on the host locale. ``clock`` supplies "now" when a
    call does not pass one.
    """

    def __init__(
        self,
        *,
        week_start: int | str = MONDAY,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.week_start = parse_week_start(week_start)
        self.clock = clock or datetime.now

    def resolve(self, period: PeriodLike, *, now: Optional[datetime] = None) -> DateRange:
        return resolve_period(period, now=now or self.clock(), week_start=self.week_start)

    def generate_report(
        self,
        period: PeriodLike,
        charges: Sequence[Charge],
        expenses: Sequence[Expense],
        *,
        now: Optional[datetime] = None,
    ) -> FinancialReport:
        """Filter both collections to the period and aggregate them."""

        requested = coerce_period(period)
        date_range = self.resolve(requested, now=now)
        label = requested.label if isinstance(requested, Period) else "Custom"

        period_charges = [c for c in charges if date_range.contains(c.occurred_at)]
        period_expenses = [e for e in expenses if date_range.contains(e.occurred_at)]

        revenue_breakdown = build_breakdown((c.charge_type, c.amount) for c in period_charges)
        expense_breakdown = build_breakdown((e.category, e.amount) for e in period_expenses)

        # Totals come from the breakdowns so the two always agree to the cent
        total_revenue = sum((item.amount for item in revenue_breakdown), ZERO)
        total_expenses = sum((item.amount for item in expense_breakdown), ZERO)
        net_profit = total_revenue - total_expenses

        logger.debug(
            "Generated report",
            extra={
                "period": label,
                "start": date_range.start.isoformat(),
                "end": date_range.end.isoformat(),
                "charges": len(period_charges),
                "expenses": len(period_expenses),
            },
        )

        return FinancialReport(
            period=date_range,
            label=label,
            total_revenue=total_revenue,
            total_expenses=total_expenses,
            net_profit=net_profit,
            profit_margin=profit_margin(total_revenue, net_profit),
            revenue_breakdown=tuple(revenue_breakdown),
            expense_breakdown=tuple(expense_breakdown),
        )


_default_engine = ReportEngine()


def generate_report(
    period: PeriodLike,
    charges: Sequence[Charge],
    expenses: Sequence[Expense],
    *,
    now: Optional[datetime] = None,
) -> FinancialReport:
    """Module-level shortcut using a Monday-start engine."""

    return _default_engine.generate_report(period, charges, expenses, now=now)


def build_report(
    period: PeriodLike,
    *,
    charge_repository: "ChargeRepository",
    expense_repository: "ExpenseRepository",
    engine: ReportEngine | None = None,
    now: Optional[datetime] = None,
) -> FinancialReport:
    """Fetch everything from the store and hand it to the engine.

    Repository errors propagate unchanged.
    """

    engine = engine if engine is not None else _default_engine
    charges = charge_repository.list_all()
    expenses = expense_repository.list_all()
    return engine.generate_report(period, charges, expenses, now=now)
