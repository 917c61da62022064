# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""

from timeledger.schemas.common import HealthResponse
from timeledger.schemas.freeze import (
    FreezeCheckRequest,
    FreezeCheckResponse,
    FreezeCheckResult,
    FreezeRule,
)
from timeledger.schemas.holiday import (
    CustomHoliday,
    HolidayRequest,
    PublicHoliday,
    ResolvedHoliday,
)
from timeledger.schemas.member import Contract, Member
from timeledger.schemas.report import (
    ConsolidatedRow,
    DayReport,
    IndividualReport,
    IndividualReportRequest,
    LeaveProration,
    PeriodSelector,
    ProjectRow,
    ReportSnapshot,
    TaskRow,
    TeamReport,
    TeamReportRequest,
)
from timeledger.schemas.time_entry import TimeEntry

__all__ = [
    "ConsolidatedRow",
    "Contract",
    "CustomHoliday",
    "DayReport",
    "FreezeCheckRequest",
    "FreezeCheckResponse",
    "FreezeCheckResult",
    "FreezeRule",
    "HealthResponse",
    "HolidayRequest",
    "IndividualReport",
    "IndividualReportRequest",
    "LeaveProration",
    "Member",
    "PeriodSelector",
    "ProjectRow",
    "PublicHoliday",
    "ReportSnapshot",
    "ResolvedHoliday",
    "TaskRow",
    "TeamReport",
    "TeamReportRequest",
    "TimeEntry",
]
