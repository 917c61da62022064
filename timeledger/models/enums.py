# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for members, holidays and reports."""

from enum import Enum


class Role(str, Enum):
    """Member role.

    Values keep the strings used by the dashboard data files.
    """

    EMPLOYEE = "Employee"
    TEAM_LEAD = "Team Lead"
    SUPER_ADMIN = "Super Admin"


class RequestStatus(str, Enum):
    """Holiday request status. Only approved requests count as leave."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class HolidayType(str, Enum):
    """Holiday duration type."""

    FULL_DAY = "Full Day"
    HALF_DAY = "Half Day"

    @property
    def credit_fraction(self) -> float:
        """Fraction of the daily expected hours credited for the holiday."""
        return 1.0 if self is HolidayType.FULL_DAY else 0.5


class HolidaySource(str, Enum):
    """Where a resolved holiday came from."""

    PUBLIC = "public"
    CUSTOM = "custom"


class PeriodKind(str, Enum):
    """Team report period granularity."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# Audience markers used by custom holidays and freeze rules
ALL_MEMBERS = "all-members"
ALL_TEAMS = "all-teams"

# Fallback task name for entries without a task part in their label
UNSPECIFIED_TASK = "Unspecified"
