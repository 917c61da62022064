# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for leave_service."""

from datetime import date

import pytest

from timeledger.schemas.member import Contract
from timeledger.services.leave_service import (
    calculate_leave_proration,
    contract_days_in_year,
)

TODAY = date(2026, 10, 19)


class TestContractDaysInYear:
    """Tests for contract_days_in_year."""

    def test_full_year(self):
        """Test a contract covering the whole year."""
        contract = Contract(start_date=date(2020, 1, 1), weekly_hours=40)
        assert contract_days_in_year(contract, 2025, TODAY) == 365
        assert contract_days_in_year(contract, 2024, TODAY) == 366

    def test_mid_year_start(self):
        """Test a contract starting on July 1."""
        contract = Contract(start_date=date(2025, 7, 1), weekly_hours=40)
        assert contract_days_in_year(contract, 2025, TODAY) == 184

    def test_open_ended_runs_until_today(self):
        """Test open-ended contracts stop at today."""
        contract = Contract(start_date=date(2025, 1, 1), weekly_hours=40)
        assert contract_days_in_year(contract, 2025, date(2025, 1, 31)) == 31

    def test_outside_year(self):
        """Test a contract outside the year has no days."""
        contract = Contract(
            start_date=date(2023, 1, 1), end_date=date(2023, 12, 31), weekly_hours=40
        )
        assert contract_days_in_year(contract, 2025, TODAY) == 0


class TestCalculateLeaveProration:
    """Tests for calculate_leave_proration."""

    def test_full_year(self):
        """Test the full allowance for a full-year contract."""
        contract = Contract(start_date=date(2020, 1, 1), weekly_hours=40)

        result = calculate_leave_proration(contract, 2025, 25, TODAY)

        assert result.days_in_year == 365
        assert result.contract_days_in_year == 365
        assert result.prorated_allowance_days == pytest.approx(25)
        assert result.daily_contract_hours == 8
        assert result.total_yearly_leave_hours == pytest.approx(200)
        assert result.daily_leave_hours == pytest.approx(200 / 365)
        assert result.daily_expected_hours == pytest.approx(8 - 200 / 365)

    def test_mid_year_start(self):
        """Test the allowance is prorated by contract days."""
        contract = Contract(start_date=date(2025, 7, 1), weekly_hours=40)

        result = calculate_leave_proration(contract, 2025, 25, TODAY)

        assert result.prorated_allowance_days == pytest.approx(25 * 184 / 365)
        assert result.total_yearly_leave_hours == pytest.approx(25 * 184 / 365 * 8)
        assert result.daily_leave_hours == pytest.approx(25 * 8 / 365)

    def test_part_time(self):
        """Test daily hours follow the weekly contract hours."""
        contract = Contract(start_date=date(2020, 1, 1), weekly_hours=20)

        result = calculate_leave_proration(contract, 2025, 25, TODAY)

        assert result.daily_contract_hours == 4
        assert result.total_yearly_leave_hours == pytest.approx(100)

    def test_outside_year_has_no_leave(self):
        """Test zero contract days zero the leave figures without dividing by zero."""
        contract = Contract(start_date=date(2026, 1, 1), weekly_hours=40)

        result = calculate_leave_proration(contract, 2025, 25, TODAY)

        assert result.contract_days_in_year == 0
        assert result.prorated_allowance_days == 0
        assert result.total_yearly_leave_hours == 0
        assert result.daily_leave_hours == 0

    def test_outside_year_keeps_contract_hours(self):
        """Test the daily contract hours stay a contract figure outside the year."""
        contract = Contract(start_date=date(2026, 1, 1), weekly_hours=40)

        result = calculate_leave_proration(contract, 2025, 25, TODAY)

        assert result.daily_contract_hours == 8
        assert result.daily_expected_hours == 8

    def test_zero_allowance(self):
        """Test without allowance the daily expectation is the contract hours."""
        contract = Contract(start_date=date(2020, 1, 1), weekly_hours=40)

        result = calculate_leave_proration(contract, 2025, 0, TODAY)

        assert result.daily_expected_hours == 8
