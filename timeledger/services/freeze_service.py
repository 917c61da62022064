# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Freeze windows that lock time entries against edits."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from timeledger.models.enums import ALL_TEAMS
from timeledger.schemas.freeze import FreezeCheckResult, FreezeRule
from timeledger.schemas.member import Member
from timeledger.services.calendar_utils import in_interval

logger = logging.getLogger(__name__)


def rule_applies(rule: FreezeRule, member: Member) -> bool:
    """Check whether a rule targets the member's team."""
    if rule.team_id == ALL_TEAMS:
        return True
    return member.team_id is not None and rule.team_id == member.team_id


def latest_weekday_on_or_before(weekday: int, today: date) -> date:
    """Most recent date with the given weekday (0 = Monday), today included."""
    return today - timedelta(days=(today.weekday() - weekday) % 7)


def rule_window(rule: FreezeRule, today: date | None = None) -> tuple[date, date]:
    """Resolve the inclusive window a rule freezes.

    Recurring rules roll forward: they end on the latest occurrence of
    recurring_day on or before today.
    """
    if rule.recurring_day is None:
        return rule.start_date, rule.end_date

    today = today or date.today()
    return rule.start_date, latest_weekday_on_or_before(rule.recurring_day, today)


def frozen_rules_for(
    entry_date: date,
    member: Member,
    rules: Iterable[FreezeRule],
    today: date | None = None,
) -> list[FreezeRule]:
    """List the rules freezing a member's entries on a date.

    Args:
        entry_date: Date of the time entry.
        member: Owner of the time entry.
        rules: All freeze rules.
        today: Reference date for recurring rules (defaults to date.today()).

    Returns:
        Matching rules in input order.
    """
    matching = []
    for rule in rules:
        if not rule_applies(rule, member):
            continue
        start, end = rule_window(rule, today)
        if in_interval(entry_date, start, end):
            matching.append(rule)
    return matching


def is_date_frozen(
    entry_date: date,
    member: Member,
    rules: Iterable[FreezeRule],
    today: date | None = None,
) -> bool:
    """Check if a member's entries on a date are locked."""
    return bool(frozen_rules_for(entry_date, member, rules, today))


def check_dates(
    dates: Iterable[date],
    member: Member,
    rules: Iterable[FreezeRule],
    today: date | None = None,
) -> list[FreezeCheckResult]:
    """Freeze status for several dates of one member."""
    rules = list(rules)
    results = []
    for d in dates:
        matching = frozen_rules_for(d, member, rules, today)
        results.append(
            FreezeCheckResult(
                date=d, frozen=bool(matching), rule_ids=[r.id for r in matching]
            )
        )

    logger.debug(
        f"Freeze check for {member.id}: "
        f"{sum(1 for r in results if r.frozen)}/{len(results)} dates frozen"
    )
    return results
