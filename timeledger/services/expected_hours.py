# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expected hours and holiday/leave credit per day."""

from collections.abc import Iterable
from datetime import date

from timeledger.schemas.holiday import HolidayRequest, ResolvedHoliday
from timeledger.schemas.member import Member
from timeledger.schemas.report import LeaveProration
from timeledger.services.calendar_utils import intersect, is_weekday, iter_days
from timeledger.services.holiday_service import holiday_dates


def approved_leave_dates(
    member_id: str,
    requests: Iterable[HolidayRequest],
    start: date,
    end: date,
) -> set[date]:
    """Expand a member's approved leave requests into dates.

    Weekend dates are kept so calendars can highlight them; callers that
    accrue hours filter on weekdays themselves.

    Args:
        member_id: The member.
        requests: All holiday requests.
        start: First day of the window (inclusive).
        end: Last day of the window (inclusive).

    Returns:
        Dates inside the window covered by an approved request.
    """
    dates: set[date] = set()
    for request in requests:
        if request.user_id != member_id or not request.is_approved:
            continue
        overlap = intersect(request.start_date, request.end_date, start, end)
        if overlap is None:
            continue
        dates.update(iter_days(*overlap))
    return dates


def holiday_credit(holiday: ResolvedHoliday, daily_expected_hours: float) -> float:
    """Hours credited for a holiday: full or half of the daily expectation."""
    return daily_expected_hours * holiday.credit_fraction


def daily_expected_map(
    member: Member,
    start: date,
    end: date,
    proration: LeaveProration,
    resolved_holidays: Iterable[ResolvedHoliday],
    holiday_requests: Iterable[HolidayRequest],
) -> dict[date, float]:
    """Expected hours for each working day of a period.

    Weekends, holidays and approved leave days carry no expectation and are
    left out of the map.

    Args:
        member: The member.
        start: First day of the period (inclusive).
        end: Last day of the period (inclusive).
        proration: The member's leave proration for the period's year.
        resolved_holidays: Holidays effective for the member.
        holiday_requests: All holiday requests.

    Returns:
        Mapping of date to expected hours.
    """
    excluded = holiday_dates(resolved_holidays) | approved_leave_dates(
        member.id, holiday_requests, start, end
    )
    expected_per_day = proration.daily_expected_hours

    return {
        d: expected_per_day
        for d in iter_days(start, end)
        if is_weekday(d) and d not in excluded
    }


def daily_credit_map(
    member: Member,
    start: date,
    end: date,
    proration: LeaveProration,
    resolved_holidays: Iterable[ResolvedHoliday],
    holiday_requests: Iterable[HolidayRequest],
) -> dict[date, float]:
    """Hours credited per day for holidays and approved leave.

    Credits from several sources on the same day add up.

    Args:
        member: The member.
        start: First day of the period (inclusive).
        end: Last day of the period (inclusive).
        proration: The member's leave proration for the period's year.
        resolved_holidays: Holidays effective for the member.
        holiday_requests: All holiday requests.

    Returns:
        Mapping of weekday date to credited hours.
    """
    expected_per_day = proration.daily_expected_hours
    credits: dict[date, float] = {}

    for holiday in resolved_holidays:
        if not (start <= holiday.date <= end) or not is_weekday(holiday.date):
            continue
        credits[holiday.date] = credits.get(holiday.date, 0.0) + holiday_credit(
            holiday, expected_per_day
        )

    for d in sorted(approved_leave_dates(member.id, holiday_requests, start, end)):
        if is_weekday(d):
            credits[d] = credits.get(d, 0.0) + expected_per_day

    return credits
