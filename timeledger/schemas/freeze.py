# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Freeze window schemas."""

import datetime
from typing import Self

from pydantic import BaseModel, Field, model_validator

from timeledger.schemas.member import Member


class FreezeRule(BaseModel):
    """Locks time entries of a team for a window.

    team_id is "all-teams" or a specific team id. recurring_day turns the
    rule into a rolling window that ends on the latest occurrence of that
    weekday. It uses datetime.weekday() numbering (0 = Monday, 6 = Sunday),
    not the 0 = Sunday numbering of JavaScript getDay(); shift such values
    with (value - 1) % 7 before building a rule.
    """

    id: str
    team_id: str
    start_date: datetime.date
    end_date: datetime.date
    recurring_day: int | None = Field(None, ge=0, le=6)

    @model_validator(mode="after")
    def validate_dates(self) -> Self:
        """Ensure fixed windows are not inverted."""
        if self.recurring_day is None and self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class FreezeCheckRequest(BaseModel):
    """Dates to check against the freeze rules of a member."""

    member: Member
    dates: list[datetime.date]
    rules: list[FreezeRule] = []
    today: datetime.date | None = None


class FreezeCheckResult(BaseModel):
    """Freeze status of one date."""

    date: datetime.date
    frozen: bool
    rule_ids: list[str] = []


class FreezeCheckResponse(BaseModel):
    """Freeze status for every requested date."""

    results: list[FreezeCheckResult]
