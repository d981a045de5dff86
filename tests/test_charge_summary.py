from datetime import datetime
from decimal import Decimal

from furfolio.models import PaymentMethod
from furfolio.services.charge_summary import (
    average_charge,
    charges_for_owner,
    revenue_by_month,
    summarize_charges,
    total_by_type,
)


def test_summarize_charges_totals_and_breakdown(charge_factory):
    charges = [
        charge_factory(amount=75, payment_method=PaymentMethod.CASH),
        charge_factory(amount=25, payment_method=PaymentMethod.UNPAID),
        charge_factory(amount=50, payment_method=PaymentMethod.CASH),
        charge_factory(amount=10, payment_method=PaymentMethod.CREDIT_CARD),
    ]

    summary = summarize_charges(charges)

    assert summary.count == 4
    assert summary.total == Decimal("160.00")
    assert summary.average == Decimal("40.00")
    assert summary.paid_total == Decimal("135.00")
    assert summary.unpaid_total == Decimal("25.00")
    assert list(summary.payment_breakdown.items()) == [
        (PaymentMethod.CASH, 2),
        (PaymentMethod.CREDIT_CARD, 1),
        (PaymentMethod.UNPAID, 1),
    ]


def test_summarize_empty():
    summary = summarize_charges([])

    assert summary.count == 0
    assert summary.total == 0
    assert summary.average == 0
    assert summary.payment_breakdown == {}


def test_total_and_average_by_type(charge_factory):
    charges = [
        charge_factory(charge_type="Bath Only", amount=20),
        charge_factory(charge_type="Bath Only", amount=25),
        charge_factory(charge_type="Nail Trim", amount=12.5),
    ]

    assert total_by_type(charges) == {"Bath Only": Decimal("45.00"), "Nail Trim": Decimal("12.50")}
    assert average_charge(charges, "Bath Only") == Decimal("22.50")
    assert average_charge(charges, "Full Package") == 0


def test_revenue_by_month_filters_year(charge_factory):
    charges = [
        charge_factory(amount=10, occurred_at=datetime(2025, 3, 1)),
        charge_factory(amount=15, occurred_at=datetime(2025, 3, 20)),
        charge_factory(amount=30, occurred_at=datetime(2025, 1, 5)),
        charge_factory(amount=99, occurred_at=datetime(2024, 3, 5)),
    ]

    assert revenue_by_month(charges, year=2025) == {1: Decimal("30.00"), 3: Decimal("25.00")}


def test_charges_for_owner_newest_first(charge_factory):
    older = charge_factory(owner_id=1, occurred_at=datetime(2025, 1, 1))
    newer = charge_factory(owner_id=1, occurred_at=datetime(2025, 2, 1))
    other = charge_factory(owner_id=2)

    result = charges_for_owner([older, other, newer], 1)

    assert len(result) == 2
    assert result[0] is newer
    assert result[1] is older
