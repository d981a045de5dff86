from datetime import datetime, timezone

import pytest

from furfolio.services.periods import (
    SUNDAY,
    DateRange,
    Period,
    parse_week_start,
    resolve_period,
    start_of_week,
)

# Thursday
NOW = datetime(2025, 3, 13, 15, 30)


def test_today_starts_at_midnight():
    rng = resolve_period(Period.TODAY, now=NOW)
    assert rng.start == datetime(2025, 3, 13)
    assert rng.end == NOW


def test_week_defaults_to_monday_start():
    rng = resolve_period("week", now=NOW)
    assert rng.start == datetime(2025, 3, 10)


def test_week_start_can_be_sunday():
    rng = resolve_period(Period.WEEK, now=NOW, week_start=SUNDAY)
    assert rng.start == datetime(2025, 3, 9)


def test_week_start_on_the_start_day_itself():
    monday = datetime(2025, 3, 10, 8, 0)
    assert start_of_week(monday) == datetime(2025, 3, 10)


def test_month_and_year_boundaries():
    assert resolve_period(Period.MONTH, now=NOW).start == datetime(2025, 3, 1)
    assert resolve_period(Period.YEAR, now=NOW).start == datetime(2025, 1, 1)


def test_explicit_range_passes_through():
    rng = DateRange(datetime(2024, 1, 1), datetime(2024, 2, 1))
    assert resolve_period(rng, now=NOW) is rng


def test_range_is_inclusive_at_both_ends():
    rng = DateRange(datetime(2024, 1, 1), datetime(2024, 2, 1))
    assert rng.contains(datetime(2024, 1, 1))
    assert rng.contains(datetime(2024, 2, 1))
    assert not rng.contains(datetime(2024, 2, 1, 0, 0, 1))


def test_inverted_range_rejected():
    with pytest.raises(ValueError):
        DateRange(datetime(2024, 2, 1), datetime(2024, 1, 1))


def test_range_rejects_mixed_naive_and_aware_bounds():
    with pytest.raises(ValueError, match="naive"):
        DateRange(datetime(2024, 1, 1, tzinfo=timezone.utc), datetime(2024, 2, 1))


def test_unknown_period_rejected():
    with pytest.raises(ValueError, match="Unknown period"):
        resolve_period("fortnight", now=NOW)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("monday", 0), ("Sun", 6), ("sat", 5), ("3", 3), (6, 6)],
)
def test_parse_week_start(value, expected):
    assert parse_week_start(value) == expected


@pytest.mark.parametrize("value", ["t", "funday", "9", 7])
def test_parse_week_start_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_week_start(value)
