# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report input and output schemas."""

import datetime
from typing import Self

from pydantic import BaseModel, Field, computed_field, model_validator

from timeledger.models.enums import PeriodKind, Role
from timeledger.schemas.holiday import CustomHoliday, HolidayRequest, PublicHoliday
from timeledger.schemas.member import Member
from timeledger.schemas.time_entry import TimeEntry

# --- Inputs ---


class ReportSnapshot(BaseModel):
    """Consistent snapshot of the collections a report is computed from."""

    members: list[Member] = []
    time_entries: list[TimeEntry] = []
    holiday_requests: list[HolidayRequest] = []
    public_holidays: list[PublicHoliday] = []
    custom_holidays: list[CustomHoliday] = []
    annual_leave_allowance: float | None = Field(None, ge=0)


class PeriodSelector(BaseModel):
    """Team report period: a week of a month, a month, or a year."""

    kind: PeriodKind
    year: int = Field(..., ge=1, le=9999)
    month: int | None = Field(None, ge=1, le=12)
    week_index: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def validate_month(self) -> Self:
        """Week and month periods need a month."""
        if self.kind != PeriodKind.YEAR and self.month is None:
            raise ValueError(f"month is required for {self.kind.value} periods")
        return self


class IndividualReportRequest(BaseModel):
    """Request body for the individual calendar report."""

    snapshot: ReportSnapshot
    viewer_id: str
    target_user_id: str | None = None
    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    today: datetime.date | None = None


class TeamReportRequest(BaseModel):
    """Request body for the team report and its export."""

    snapshot: ReportSnapshot
    viewer_id: str
    period: PeriodSelector
    today: datetime.date | None = None  # export filename date


# --- Outputs ---


class LeaveProration(BaseModel):
    """Leave allowance prorated over the contract days of one year."""

    year: int
    days_in_year: int
    contract_days_in_year: int
    prorated_allowance_days: float
    daily_contract_hours: float
    total_yearly_leave_hours: float
    daily_leave_hours: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def daily_expected_hours(self) -> float:
        """Contract hours per day after the leave credit."""
        return self.daily_contract_hours - self.daily_leave_hours


class DayReport(BaseModel):
    """One calendar day of the individual report."""

    day: int
    date: datetime.date
    is_weekend: bool
    is_personal_leave: bool = False
    is_public_holiday: bool = False
    is_custom_holiday: bool = False
    holiday_name: str | None = None
    expected_hours: float | None = None
    logged_hours: float = 0.0
    credited_hours: float = 0.0
    entries: list[TimeEntry] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_hours(self) -> float:
        """Logged hours plus holiday and leave credit."""
        return self.logged_hours + self.credited_hours


class IndividualReport(BaseModel):
    """Month calendar for a single member."""

    year: int
    month: int
    member: Member | None = None
    no_user_selected: bool = False
    can_edit_entries: bool = False
    proration: LeaveProration | None = None
    days: dict[int, DayReport] = {}
    available_years: list[int] = []
    available_months: list[int] = []
    total_expected_hours: float = 0.0
    total_logged_hours: float = 0.0
    total_credited_hours: float = 0.0


class ConsolidatedRow(BaseModel):
    """Per-member hours summary for a period."""

    member_id: str
    name: str
    email: str | None = None
    role: Role
    working_days_in_year: int
    working_days_in_period: int
    assigned_hours: float
    leave_hours: float
    expected_hours: float
    logged_hours: float
    remaining_hours: float


class ProjectRow(BaseModel):
    """Hours a member logged against one project."""

    member_id: str
    member_name: str
    role: Role
    project_name: str
    logged_hours: float


class TaskRow(BaseModel):
    """Hours a member logged against one task."""

    member_id: str
    member_name: str
    role: Role
    task_name: str
    logged_hours: float


class TeamReport(BaseModel):
    """Consolidated, project-level and task-level rows for a period."""

    period: PeriodSelector
    period_start: datetime.date
    period_end: datetime.date
    consolidated: list[ConsolidatedRow] = []
    by_project: list[ProjectRow] = []
    by_task: list[TaskRow] = []
