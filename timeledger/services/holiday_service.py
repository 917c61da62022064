# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday resolution for members and public holiday calendars."""

import logging
from collections.abc import Iterable
from datetime import date

import holidays

from timeledger.models.enums import ALL_MEMBERS, ALL_TEAMS, HolidaySource, HolidayType
from timeledger.schemas.holiday import CustomHoliday, PublicHoliday, ResolvedHoliday
from timeledger.services.calendar_utils import in_interval, is_weekday
from timeledger.services.errors import ReportDataError

logger = logging.getLogger(__name__)


def custom_holiday_applies(holiday: CustomHoliday, team_id: str | None) -> bool:
    """Check whether a custom holiday targets a member's team.

    Args:
        holiday: The custom holiday.
        team_id: The member's team, or None for members without a team.

    Returns:
        True for "all-members", for "all-teams" when the member has a team,
        and when applies_to equals the member's team id.
    """
    if holiday.applies_to == ALL_MEMBERS:
        return True
    if holiday.applies_to == ALL_TEAMS:
        return bool(team_id)
    return team_id is not None and holiday.applies_to == team_id


def resolve_holidays(
    public_holidays: Iterable[PublicHoliday],
    custom_holidays: Iterable[CustomHoliday],
    team_id: str | None,
    start: date,
    end: date,
) -> list[ResolvedHoliday]:
    """Merge the holiday calendars effective for a member.

    Weekend holidays are dropped since they never change expected hours.

    Args:
        public_holidays: Public holidays, applicable to everyone.
        custom_holidays: Organization holidays with an audience.
        team_id: The member's team id.
        start: First day of the period (inclusive).
        end: Last day of the period (inclusive).

    Returns:
        Holidays ordered by date; public before custom on the same date.
    """
    resolved: list[ResolvedHoliday] = []

    for holiday in public_holidays:
        if in_interval(holiday.date, start, end) and is_weekday(holiday.date):
            resolved.append(
                ResolvedHoliday(
                    date=holiday.date,
                    name=holiday.name,
                    type=holiday.type,
                    source=HolidaySource.PUBLIC,
                )
            )

    for holiday in custom_holidays:
        if not in_interval(holiday.date, start, end) or not is_weekday(holiday.date):
            continue
        if not custom_holiday_applies(holiday, team_id):
            continue
        resolved.append(
            ResolvedHoliday(
                date=holiday.date,
                name=holiday.name,
                type=holiday.type,
                source=HolidaySource.CUSTOM,
            )
        )

    return sorted(
        resolved,
        key=lambda h: (h.date, 0 if h.source == HolidaySource.PUBLIC else 1),
    )


def holiday_dates(resolved: Iterable[ResolvedHoliday]) -> set[date]:
    """Dates covered by at least one resolved holiday."""
    return {h.date for h in resolved}


def public_holidays_for_year(
    year: int,
    country: str = "AT",
    subdiv: str | None = None,
) -> list[PublicHoliday]:
    """Build the public holiday calendar of a country.

    Args:
        year: The year.
        country: ISO 3166 country code.
        subdiv: Optional state/region code.

    Returns:
        Full-day public holidays ordered by date.

    Raises:
        ReportDataError: If the country or subdivision is not supported.
    """
    try:
        calendar = holidays.country_holidays(country, subdiv=subdiv, years=year)
    except NotImplementedError:
        raise ReportDataError(
            f"No public holiday calendar for country: {country}"
        ) from None

    logger.debug(f"Loaded {len(calendar)} public holidays for {country} {year}")

    return [
        PublicHoliday(
            id=f"{country}-{holiday_date.isoformat()}",
            country=country,
            name=name,
            date=holiday_date,
            type=HolidayType.FULL_DAY,
        )
        for holiday_date, name in sorted(calendar.items())
    ]
