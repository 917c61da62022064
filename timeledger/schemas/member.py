# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member and contract schemas."""

import datetime
from typing import Self

from pydantic import BaseModel, Field, model_validator

from timeledger.models.enums import Role


class Contract(BaseModel):
    """Employment contract terms.

    A missing end_date means the contract is open-ended; calculations use the
    current date as the horizon.
    """

    start_date: datetime.date
    end_date: datetime.date | None = None
    weekly_hours: float = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_dates(self) -> Self:
        """Ensure end_date is on or after start_date."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self

    @property
    def daily_hours(self) -> float:
        """Contract hours for one working day of a five-day week."""
        return self.weekly_hours / 5

    def effective_end(self, today: datetime.date) -> datetime.date:
        """Return the end date, or today for open-ended contracts."""
        return self.end_date if self.end_date is not None else today


class Member(BaseModel):
    """A team member with role, reporting line and contract."""

    id: str = Field(..., min_length=1)
    name: str
    email: str | None = None
    role: Role = Role.EMPLOYEE
    reports_to: str | None = None
    team_id: str | None = None
    contract: Contract
