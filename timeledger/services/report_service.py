# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Individual and team hour reports."""

import logging
from collections.abc import Iterable
from datetime import date

from timeledger.models.enums import UNSPECIFIED_TASK, HolidaySource, PeriodKind
from timeledger.schemas.member import Member
from timeledger.schemas.report import (
    ConsolidatedRow,
    DayReport,
    IndividualReport,
    PeriodSelector,
    ProjectRow,
    ReportSnapshot,
    TaskRow,
    TeamReport,
)
from timeledger.schemas.time_entry import TimeEntry
from timeledger.services.access_service import (
    can_edit_entries,
    find_member,
    resolve_target_member,
    visible_members,
)
from timeledger.services.calendar_utils import (
    available_months,
    available_years,
    in_interval,
    is_weekday,
    is_weekend,
    iter_days,
    month_bounds,
    weeks_for_month,
    year_bounds,
)
from timeledger.services.errors import ReportDataError
from timeledger.services.expected_hours import (
    approved_leave_dates,
    daily_credit_map,
    daily_expected_map,
)
from timeledger.services.holiday_service import holiday_dates, resolve_holidays
from timeledger.services.leave_service import calculate_leave_proration

logger = logging.getLogger(__name__)

TASK_LABEL_SEPARATOR = " - "


# --- Task label helpers ---


def split_task_label(label: str) -> tuple[str, str]:
    """Split a "Project - Task" label on its first separator.

    Returns:
        (project_name, task_name); task_name is "" without a separator.
    """
    project_name, _, task_name = label.partition(TASK_LABEL_SEPARATOR)
    return project_name, task_name


def entry_project_name(entry: TimeEntry) -> str:
    """Project an entry counts towards."""
    if entry.project:
        return entry.project
    return split_task_label(entry.task)[0]


def entry_task_name(entry: TimeEntry) -> str:
    """Task an entry counts towards, "Unspecified" when the label has none."""
    if entry.task_name:
        return entry.task_name
    return split_task_label(entry.task)[1] or UNSPECIFIED_TASK


# --- Shared helpers ---


def _leave_allowance(snapshot: ReportSnapshot) -> float:
    if snapshot.annual_leave_allowance is None:
        raise ReportDataError("annual_leave_allowance is required")
    return snapshot.annual_leave_allowance


def _sort_by_member_name(rows: list, name_of) -> list:
    # Stable: ties keep first-seen order
    return sorted(rows, key=lambda row: name_of(row).casefold())


def count_working_days(start: date, end: date, excluded: set[date]) -> int:
    """Count weekdays of an inclusive period that are not excluded."""
    return sum(1 for d in iter_days(start, end) if is_weekday(d) and d not in excluded)


def resolve_period(period: PeriodSelector) -> tuple[date, date]:
    """Turn a period selector into inclusive start and end dates.

    A week index outside the month falls back to the whole month.

    Raises:
        ReportDataError: If a week or month period has no month.
    """
    if period.kind == PeriodKind.YEAR:
        return year_bounds(period.year)

    if period.month is None:
        raise ReportDataError(f"month is required for {period.kind.value} periods")

    if period.kind == PeriodKind.WEEK:
        weeks = weeks_for_month(period.year, period.month)
        index = period.week_index or 0
        if index < len(weeks):
            return weeks[index]
        logger.warning(
            f"Week index {index} outside {period.year}-{period.month:02d}, "
            "using the whole month"
        )

    return month_bounds(period.year, period.month)


# --- Individual report ---


def build_individual_report(
    snapshot: ReportSnapshot,
    viewer_id: str,
    year: int,
    month: int,
    target_user_id: str | None = None,
    today: date | None = None,
) -> IndividualReport:
    """Build the month calendar of one member.

    Each day carries logged hours, holiday/leave credit and, for working
    days without holiday or leave, the expected hours.

    Args:
        snapshot: Input collections.
        viewer_id: Member requesting the report.
        year: Year of the month to show.
        month: Month to show (1-12).
        target_user_id: Member to show; defaults to the viewer.
        today: Horizon for open-ended contracts (defaults to date.today()).

    Returns:
        The report; no_user_selected is set when no visible member matches.
    """
    today = today or date.today()
    viewer = find_member(snapshot.members, viewer_id)
    member = resolve_target_member(viewer, snapshot.members, target_user_id)

    if viewer is None or member is None:
        logger.info(
            f"No user selected for viewer {viewer_id!r} and target {target_user_id!r}"
        )
        return IndividualReport(year=year, month=month, no_user_selected=True)

    month_start, month_end = month_bounds(year, month)
    proration = calculate_leave_proration(
        member.contract, year, _leave_allowance(snapshot), today
    )
    resolved = resolve_holidays(
        snapshot.public_holidays,
        snapshot.custom_holidays,
        member.team_id,
        month_start,
        month_end,
    )

    expected = daily_expected_map(
        member, month_start, month_end, proration, resolved, snapshot.holiday_requests
    )
    credits = daily_credit_map(
        member, month_start, month_end, proration, resolved, snapshot.holiday_requests
    )
    leave_days = approved_leave_dates(
        member.id, snapshot.holiday_requests, month_start, month_end
    )

    entries_by_day: dict[date, list[TimeEntry]] = {}
    for entry in snapshot.time_entries:
        if entry.user_id == member.id and in_interval(entry.date, month_start, month_end):
            entries_by_day.setdefault(entry.date, []).append(entry)

    # Later holidays win the label, so custom names replace public ones
    holiday_names = {h.date: h.name for h in resolved}
    public_days = {h.date for h in resolved if h.source == HolidaySource.PUBLIC}
    custom_days = {h.date for h in resolved if h.source == HolidaySource.CUSTOM}

    days: dict[int, DayReport] = {}
    for d in iter_days(month_start, month_end):
        day_entries = entries_by_day.get(d, [])
        days[d.day] = DayReport(
            day=d.day,
            date=d,
            is_weekend=is_weekend(d),
            is_personal_leave=d in leave_days,
            is_public_holiday=d in public_days,
            is_custom_holiday=d in custom_days,
            holiday_name=holiday_names.get(d),
            expected_hours=expected.get(d),
            logged_hours=sum(e.duration for e in day_entries),
            credited_hours=credits.get(d, 0.0),
            entries=day_entries,
        )

    logger.debug(
        f"Individual report {member.id} {year}-{month:02d}: "
        f"{len(expected)} expected days, {len(holiday_dates(resolved))} holidays"
    )

    return IndividualReport(
        year=year,
        month=month,
        member=member,
        can_edit_entries=can_edit_entries(viewer, member),
        proration=proration,
        days=days,
        available_years=available_years(member.contract, today),
        available_months=available_months(member.contract, year),
        total_expected_hours=sum(expected.values()),
        total_logged_hours=sum(day.logged_hours for day in days.values()),
        total_credited_hours=sum(credits.values()),
    )


# --- Team report ---


def _consolidated_row(
    member: Member,
    snapshot: ReportSnapshot,
    period: PeriodSelector,
    period_start: date,
    period_end: date,
    entries: list[TimeEntry],
    annual_leave_allowance: float,
) -> ConsolidatedRow:
    year_start, year_end = year_bounds(period.year)
    resolved = resolve_holidays(
        snapshot.public_holidays,
        snapshot.custom_holidays,
        member.team_id,
        year_start,
        year_end,
    )
    excluded = holiday_dates(resolved)

    working_days_in_year = count_working_days(year_start, year_end, excluded)
    working_days_in_period = count_working_days(period_start, period_end, excluded)

    daily_contract_hours = member.contract.daily_hours
    assigned_hours = working_days_in_period * daily_contract_hours
    total_yearly_leave_hours = annual_leave_allowance * daily_contract_hours
    daily_leave_credit = (
        total_yearly_leave_hours / working_days_in_year
        if working_days_in_year > 0
        else 0.0
    )
    leave_hours = daily_leave_credit * working_days_in_period
    expected_hours = assigned_hours - leave_hours
    logged_hours = sum(e.duration for e in entries if e.user_id == member.id)

    return ConsolidatedRow(
        member_id=member.id,
        name=member.name,
        email=member.email,
        role=member.role,
        working_days_in_year=working_days_in_year,
        working_days_in_period=working_days_in_period,
        assigned_hours=assigned_hours,
        leave_hours=leave_hours,
        expected_hours=expected_hours,
        logged_hours=logged_hours,
        remaining_hours=expected_hours - logged_hours,
    )


def _group_hours(
    entries: Iterable[TimeEntry],
    key_of,
) -> dict[tuple[str, str], float]:
    totals: dict[tuple[str, str], float] = {}
    for entry in entries:
        key = (entry.user_id, key_of(entry))
        totals[key] = totals.get(key, 0.0) + entry.duration
    return totals


def build_project_rows(
    entries: Iterable[TimeEntry], members: dict[str, Member]
) -> list[ProjectRow]:
    """Sum hours per (member, project), sorted by member name."""
    rows = [
        ProjectRow(
            member_id=member_id,
            member_name=members[member_id].name,
            role=members[member_id].role,
            project_name=project_name,
            logged_hours=hours,
        )
        for (member_id, project_name), hours in _group_hours(
            entries, entry_project_name
        ).items()
        if member_id in members
    ]
    return _sort_by_member_name(rows, lambda row: row.member_name)


def build_task_rows(
    entries: Iterable[TimeEntry], members: dict[str, Member]
) -> list[TaskRow]:
    """Sum hours per (member, task), sorted by member name."""
    rows = [
        TaskRow(
            member_id=member_id,
            member_name=members[member_id].name,
            role=members[member_id].role,
            task_name=task_name,
            logged_hours=hours,
        )
        for (member_id, task_name), hours in _group_hours(
            entries, entry_task_name
        ).items()
        if member_id in members
    ]
    return _sort_by_member_name(rows, lambda row: row.member_name)


def build_team_report(
    snapshot: ReportSnapshot,
    viewer_id: str,
    period: PeriodSelector,
) -> TeamReport:
    """Build consolidated, project and task rows for the viewer's team.

    Args:
        snapshot: Input collections.
        viewer_id: Member requesting the report; scopes the visible members.
        period: Week, month or year to report on.

    Returns:
        The team report with every row list sorted by member name.

    Raises:
        ReportDataError: If the viewer is unknown or the period is incomplete.
    """
    viewer = find_member(snapshot.members, viewer_id)
    if viewer is None:
        raise ReportDataError(f"Unknown viewer: {viewer_id}")

    allowance = _leave_allowance(snapshot)
    period_start, period_end = resolve_period(period)
    members = visible_members(viewer, snapshot.members)
    members_by_id = {m.id: m for m in members}

    known_ids = {m.id for m in snapshot.members}
    orphaned = [e.id for e in snapshot.time_entries if e.user_id not in known_ids]
    if orphaned:
        logger.warning(
            f"Dropping {len(orphaned)} time entries of unknown members: {orphaned}"
        )

    entries = [
        e
        for e in snapshot.time_entries
        if e.user_id in members_by_id and in_interval(e.date, period_start, period_end)
    ]

    consolidated = [
        _consolidated_row(
            member, snapshot, period, period_start, period_end, entries, allowance
        )
        for member in members
    ]

    logger.debug(
        f"Team report for {viewer.id}: {len(members)} members, "
        f"{len(entries)} entries between {period_start} and {period_end}"
    )

    return TeamReport(
        period=period,
        period_start=period_start,
        period_end=period_end,
        consolidated=_sort_by_member_name(consolidated, lambda row: row.name),
        by_project=build_project_rows(entries, members_by_id),
        by_task=build_task_rows(entries, members_by_id),
    )
