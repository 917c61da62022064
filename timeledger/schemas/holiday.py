# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday and leave request schemas."""

import datetime
from typing import Self

from pydantic import BaseModel, model_validator

from timeledger.models.enums import (
    ALL_MEMBERS,
    HolidaySource,
    HolidayType,
    RequestStatus,
)


class PublicHoliday(BaseModel):
    """Public holiday; applies to every member."""

    id: str
    country: str = ""
    name: str
    date: datetime.date
    type: HolidayType = HolidayType.FULL_DAY


class CustomHoliday(PublicHoliday):
    """Organization holiday restricted to an audience.

    applies_to is "all-members", "all-teams" or a specific team id.
    """

    applies_to: str = ALL_MEMBERS


class HolidayRequest(BaseModel):
    """Personal leave request covering an inclusive date range."""

    id: str
    user_id: str
    start_date: datetime.date
    end_date: datetime.date
    status: RequestStatus = RequestStatus.PENDING

    @model_validator(mode="after")
    def validate_dates(self) -> Self:
        """Ensure end_date is on or after start_date."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self

    @property
    def is_approved(self) -> bool:
        """Whether the request counts as leave."""
        return self.status == RequestStatus.APPROVED


class ResolvedHoliday(BaseModel):
    """A holiday effective for one member on a weekday."""

    date: datetime.date
    name: str
    type: HolidayType
    source: HolidaySource

    @property
    def credit_fraction(self) -> float:
        """1.0 for full-day holidays, 0.5 for half-day ones."""
        return self.type.credit_fraction
