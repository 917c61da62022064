# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave allowance proration."""

import logging
from datetime import date

from timeledger.schemas.member import Contract
from timeledger.schemas.report import LeaveProration
from timeledger.services.calendar_utils import (
    count_days,
    days_in_year,
    intersect,
    year_bounds,
)

logger = logging.getLogger(__name__)


def contract_days_in_year(
    contract: Contract,
    year: int,
    today: date | None = None,
) -> int:
    """Count calendar days of a year covered by the contract.

    Open-ended contracts run until today.

    Args:
        contract: The contract.
        year: The year.
        today: Horizon for open-ended contracts (defaults to date.today()).

    Returns:
        Number of days, 0 if the contract does not overlap the year.
    """
    today = today or date.today()
    year_start, year_end = year_bounds(year)
    overlap = intersect(
        contract.start_date, contract.effective_end(today), year_start, year_end
    )
    if overlap is None:
        return 0
    return count_days(*overlap)


def calculate_leave_proration(
    contract: Contract,
    year: int,
    annual_leave_allowance: float,
    today: date | None = None,
) -> LeaveProration:
    """Prorate the annual leave allowance over a contract's days in a year.

    The allowance (days per year) is scaled by the share of the year the
    contract is active, converted to hours with the contract's daily hours,
    and spread evenly over the contract days as a daily leave credit.

    Args:
        contract: The member's contract.
        year: The year to prorate for.
        annual_leave_allowance: Leave days per full year.
        today: Horizon for open-ended contracts (defaults to date.today()).

    Returns:
        The proration figures. Contract days and every leave figure are
        zero when the contract lies outside the year; the daily contract
        hours stay a contract figure.
    """
    total_days = days_in_year(year)
    contract_days = contract_days_in_year(contract, year, today)
    daily_contract_hours = contract.daily_hours

    prorated_allowance_days = annual_leave_allowance * contract_days / total_days
    total_yearly_leave_hours = prorated_allowance_days * daily_contract_hours
    daily_leave_hours = (
        total_yearly_leave_hours / contract_days if contract_days > 0 else 0.0
    )

    logger.debug(
        f"Proration {year}: {contract_days}/{total_days} days, "
        f"{prorated_allowance_days:.2f} leave days"
    )

    return LeaveProration(
        year=year,
        days_in_year=total_days,
        contract_days_in_year=contract_days,
        prorated_allowance_days=prorated_allowance_days,
        daily_contract_hours=daily_contract_hours,
        total_yearly_leave_hours=total_yearly_leave_hours,
        daily_leave_hours=daily_leave_hours,
    )
