"""Per-owner and per-type charge rollups used by summary screens."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..models.charge import Charge, PaymentMethod
from .reports import CENT, ZERO, to_money


@dataclass(frozen=True, slots=True)
class ChargeSummary:
    count: int
    total: Decimal
    average: Decimal
    paid_total: Decimal
    unpaid_total: Decimal
    payment_breakdown: dict[PaymentMethod, int]


def summarize_charges(charges: Iterable[Charge]) -> ChargeSummary:
    """Totals, average and payment-method counts for a set of charges."""

    items = list(charges)
    paid = sum((to_money(c.amount) for c in items if c.is_paid), ZERO)
    unpaid = sum((to_money(c.amount) for c in items if not c.is_paid), ZERO)
    total = paid + unpaid
    average = (total / len(items)).quantize(CENT, rounding=ROUND_HALF_UP) if items else ZERO

    counts: dict[PaymentMethod, int] = defaultdict(int)
    for charge in items:
        counts[PaymentMethod(charge.payment_method)] += 1
    # Enum declaration order, present methods only
    breakdown = {method: counts[method] for method in PaymentMethod if counts.get(method)}

    return ChargeSummary(
        count=len(items),
        total=total,
        average=average,
        paid_total=paid,
        unpaid_total=unpaid,
        payment_breakdown=breakdown,
    )


def total_by_type(charges: Iterable[Charge]) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for charge in charges:
        totals[charge.charge_type] += to_money(charge.amount)
    return dict(totals)


def average_charge(charges: Iterable[Charge], charge_type: str) -> Decimal:
    """Mean amount of the charges of one type (0 when there are none)."""

    amounts = [to_money(c.amount) for c in charges if c.charge_type == charge_type]
    if not amounts:
        return ZERO
    return (sum(amounts, ZERO) / len(amounts)).quantize(CENT, rounding=ROUND_HALF_UP)


def revenue_by_month(charges: Iterable[Charge], *, year: int) -> dict[int, Decimal]:
    """Month number -> revenue for ``year``; months without charges are omitted."""

    totals: dict[int, Decimal] = defaultdict(lambda: ZERO)
    for charge in charges:
        if charge.occurred_at.year == year:
            totals[charge.occurred_at.month] += to_money(charge.amount)
    return dict(sorted(totals.items()))


def charges_for_owner(charges: Iterable[Charge], owner_id: int) -> list[Charge]:
    """Charges billed to ``owner_id``, newest first."""

    owned = [c for c in charges if c.owner_id == owner_id]
    return sorted(owned, key=lambda c: c.occurred_at, reverse=True)
