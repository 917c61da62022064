# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar and date interval helpers."""

from calendar import isleap, monthrange
from collections.abc import Iterator
from datetime import date, timedelta

from timeledger.schemas.member import Contract


def is_weekend(d: date) -> bool:
    """Return True for Saturday and Sunday."""
    return d.weekday() >= 5  # Saturday = 5, Sunday = 6


def is_weekday(d: date) -> bool:
    """Return True for Monday through Friday."""
    return not is_weekend(d)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, both inclusive."""
    if start > end:
        return
    current = start
    while True:
        yield current
        # Stop before stepping past date.max
        if current == end:
            return
        current += timedelta(days=1)


def in_interval(d: date, start: date, end: date) -> bool:
    """Check inclusive interval membership."""
    return start <= d <= end


def intersect(
    start1: date, end1: date, start2: date, end2: date
) -> tuple[date, date] | None:
    """Intersect two inclusive intervals.

    Returns:
        The overlapping interval, or None if the intervals are disjoint.
    """
    start = max(start1, start2)
    end = min(end1, end2)
    if start > end:
        return None
    return start, end


def count_days(start: date, end: date) -> int:
    """Number of calendar days in an inclusive interval (0 if inverted)."""
    if start > end:
        return 0
    return (end - start).days + 1


def days_in_year(year: int) -> int:
    """Return 366 for leap years, else 365."""
    return 366 if isleap(year) else 365


def year_bounds(year: int) -> tuple[date, date]:
    """Return January 1 and December 31 of a year."""
    return date(year, 1, 1), date(year, 12, 31)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    _, last_day = monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def week_start(d: date) -> date:
    """Return the Monday on or before a date."""
    return d - timedelta(days=d.weekday())


def weeks_for_month(year: int, month: int) -> list[tuple[date, date]]:
    """Split a month into Monday-based weeks.

    The walk starts at the Monday on or before the 1st; the first and last
    weeks are clipped to the month.

    Args:
        year: The year.
        month: The month (1-12).

    Returns:
        List of inclusive (start, end) pairs in calendar order.
    """
    first_day, last_day = month_bounds(year, month)
    weeks: list[tuple[date, date]] = []

    current = week_start(first_day)
    while True:
        start = max(current, first_day)
        # Clip before adding so December 9999 stays within date.max
        if (last_day - current).days < 7:
            end = last_day
        else:
            end = current + timedelta(days=6)
        weeks.append((start, end))
        if end == last_day:
            break
        current += timedelta(days=7)

    return weeks


# --- Contract-aware navigation ---


def available_years(contract: Contract, today: date | None = None) -> list[int]:
    """Years a member can be reported on, newest first."""
    today = today or date.today()
    end_year = contract.effective_end(today).year
    return list(range(end_year, contract.start_date.year - 1, -1))


def available_months(contract: Contract, year: int) -> list[int]:
    """Months of a year covered by the contract.

    Open-ended contracts are not limited at the end of the year.
    """
    start_month = 1
    if year == contract.start_date.year:
        start_month = contract.start_date.month

    end_month = 12
    if contract.end_date is not None and year == contract.end_date.year:
        end_month = contract.end_date.month

    return list(range(start_month, end_month + 1))


def clamp_month_to_contract(
    contract: Contract,
    year: int,
    month: int,
    today: date | None = None,
) -> tuple[int, int]:
    """Move a (year, month) selection inside the contract period.

    Returns:
        The clamped (year, month) pair.
    """
    today = today or date.today()
    selected = date(year, month, 1)
    first = contract.start_date.replace(day=1)
    last = contract.effective_end(today).replace(day=1)

    if selected < first:
        selected = first
    if selected > last:
        selected = last

    return selected.year, selected.month
