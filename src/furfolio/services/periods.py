"""Reporting periods and their date-range resolution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Union

MONDAY = 0
SUNDAY = 6

_WEEKDAY_NAMES = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


class Period(str, Enum):
    """Named reporting windows ending at "now"."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class DateRange:
    """A closed ``[start, end]`` window of naive datetimes.

    Both bounds are included: a record stamped exactly at ``end`` falls
    inside the range, the same as for the named periods.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValueError("Range start and end must both be naive or both be timezone-aware")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


PeriodLike = Union[Period, str, DateRange]


def parse_week_start(value: int | str) -> int:
    """Return a weekday index (0 = Monday) from a name, prefix or integer."""

    if isinstance(value, int):
        weekday = value
    else:
        text = value.strip().lower()
        if text.isdigit():
            weekday = int(text)
        else:
            matches = [idx for name, idx in _WEEKDAY_NAMES.items() if len(text) >= 3 and name.startswith(text)]
            if len(matches) != 1:
                raise ValueError(f"Unknown week start day: {value!r}")
            weekday = matches[0]
    if not MONDAY <= weekday <= SUNDAY:
        raise ValueError(f"Week start must be between 0 and 6, got {weekday}")
    return weekday


def coerce_period(period: PeriodLike) -> Period | DateRange:
    if isinstance(period, (Period, DateRange)):
        return period
    try:
        return Period(str(period).strip().lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in Period)
        raise ValueError(f"Unknown period {period!r}; expected one of: {choices}") from exc


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(moment: datetime, week_start: int = MONDAY) -> datetime:
    """Midnight of the most recent ``week_start`` weekday on or before ``moment``."""

    offset = (moment.weekday() - week_start) % 7
    return start_of_day(moment) - timedelta(days=offset)


def resolve_period(
    period: PeriodLike, *, now: datetime, week_start: int = MONDAY
) -> DateRange:
    """Turn a named period (or explicit range) into a concrete ``DateRange``."""

    resolved = coerce_period(period)
    if isinstance(resolved, DateRange):
        return resolved
    if resolved is Period.TODAY:
        start = start_of_day(now)
    elif resolved is Period.WEEK:
        start = start_of_week(now, week_start)
    elif resolved is Period.MONTH:
        start = start_of_day(now.replace(day=1))
    else:
        start = start_of_day(now.replace(month=1, day=1))
    return DateRange(start=start, end=now)
