# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain enumerations package."""

from timeledger.models.enums import (
    ALL_MEMBERS,
    ALL_TEAMS,
    UNSPECIFIED_TASK,
    HolidaySource,
    HolidayType,
    PeriodKind,
    RequestStatus,
    Role,
)

__all__ = [
    "ALL_MEMBERS",
    "ALL_TEAMS",
    "UNSPECIFIED_TASK",
    "HolidaySource",
    "HolidayType",
    "PeriodKind",
    "RequestStatus",
    "Role",
]
