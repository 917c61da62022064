# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for expected_hours."""

from datetime import date

import pytest

from timeledger.models.enums import HolidaySource, HolidayType, RequestStatus
from timeledger.schemas.holiday import HolidayRequest, ResolvedHoliday
from timeledger.schemas.report import LeaveProration
from timeledger.services.expected_hours import (
    approved_leave_dates,
    daily_credit_map,
    daily_expected_map,
    holiday_credit,
)

WEEK = (date(2025, 1, 6), date(2025, 1, 12))


@pytest.fixture
def proration() -> LeaveProration:
    """Full-time proration without leave allowance (8 hours a day)."""
    return LeaveProration(
        year=2025,
        days_in_year=365,
        contract_days_in_year=365,
        prorated_allowance_days=0,
        daily_contract_hours=8,
        total_yearly_leave_hours=0,
        daily_leave_hours=0,
    )


def holiday(day: date, type: HolidayType = HolidayType.FULL_DAY, source=HolidaySource.PUBLIC):
    return ResolvedHoliday(date=day, name="Holiday", type=type, source=source)


def leave(start: date, end: date, status: RequestStatus = RequestStatus.APPROVED):
    return HolidayRequest(
        id=f"hr-{start}", user_id="anna", start_date=start, end_date=end, status=status
    )


class TestApprovedLeaveDates:
    """Tests for approved_leave_dates."""

    def test_includes_weekend_days(self):
        """Test weekend days of a request are kept."""
        dates = approved_leave_dates(
            "anna", [leave(date(2025, 1, 9), date(2025, 1, 12))], *WEEK
        )
        assert dates == {
            date(2025, 1, 9),
            date(2025, 1, 10),
            date(2025, 1, 11),
            date(2025, 1, 12),
        }

    def test_only_approved_requests(self):
        """Test pending and rejected requests are ignored."""
        requests = [
            leave(date(2025, 1, 6), date(2025, 1, 6), RequestStatus.PENDING),
            leave(date(2025, 1, 7), date(2025, 1, 7), RequestStatus.REJECTED),
        ]
        assert approved_leave_dates("anna", requests, *WEEK) == set()

    def test_other_member_ignored(self):
        """Test requests of other members are ignored."""
        requests = [leave(date(2025, 1, 6), date(2025, 1, 7))]
        assert approved_leave_dates("bob", requests, *WEEK) == set()

    def test_clipped_to_window(self):
        """Test requests spanning the window are clipped."""
        requests = [leave(date(2024, 12, 30), date(2025, 1, 7))]
        assert approved_leave_dates("anna", requests, *WEEK) == {
            date(2025, 1, 6),
            date(2025, 1, 7),
        }


class TestDailyExpectedMap:
    """Tests for daily_expected_map."""

    def test_full_week(self, anna, proration):
        """Test a full week without holidays expects 40 hours."""
        expected = daily_expected_map(anna, *WEEK, proration, [], [])

        assert len(expected) == 5
        assert sum(expected.values()) == 40
        assert date(2025, 1, 11) not in expected
        assert date(2025, 1, 12) not in expected

    def test_holidays_and_leave_excluded(self, anna, proration):
        """Test holiday and leave days carry no expectation."""
        expected = daily_expected_map(
            anna,
            *WEEK,
            proration,
            [holiday(date(2025, 1, 6), HolidayType.HALF_DAY)],
            [leave(date(2025, 1, 9), date(2025, 1, 12))],
        )

        assert sorted(expected) == [date(2025, 1, 7), date(2025, 1, 8)]
        assert sum(expected.values()) == 16

    def test_uses_prorated_daily_hours(self, anna):
        """Test the daily expectation subtracts the leave credit."""
        proration = LeaveProration(
            year=2025,
            days_in_year=365,
            contract_days_in_year=365,
            prorated_allowance_days=25,
            daily_contract_hours=8,
            total_yearly_leave_hours=200,
            daily_leave_hours=200 / 365,
        )
        expected = daily_expected_map(anna, *WEEK, proration, [], [])
        assert sum(expected.values()) == pytest.approx(5 * (8 - 200 / 365))


class TestDailyCreditMap:
    """Tests for holiday and leave credit."""

    def test_holiday_credit(self, proration):
        """Test full-day holidays credit the daily expectation, half-days half."""
        assert holiday_credit(holiday(date(2025, 1, 6)), 8) == 8
        assert holiday_credit(holiday(date(2025, 1, 6), HolidayType.HALF_DAY), 8) == 4

    def test_leave_credit_on_weekdays_only(self, anna, proration):
        """Test approved leave credits weekdays but not the weekend."""
        credits = daily_credit_map(
            anna, *WEEK, proration, [], [leave(date(2025, 1, 9), date(2025, 1, 12))]
        )
        assert credits == {date(2025, 1, 9): 8, date(2025, 1, 10): 8}

    def test_credits_add_up(self, anna, proration):
        """Test several credits on the same day are summed."""
        day = date(2025, 1, 6)
        credits = daily_credit_map(
            anna,
            *WEEK,
            proration,
            [
                holiday(day),
                holiday(day, HolidayType.HALF_DAY, HolidaySource.CUSTOM),
            ],
            [leave(day, day)],
        )
        assert credits == {day: 20}


class TestHolidayRequest:
    """Tests for the HolidayRequest schema."""

    def test_fields(self):
        """Test a request carries only the fields that decide leave."""
        request = HolidayRequest(
            id="hr",
            user_id="anna",
            start_date=date(2025, 1, 9),
            end_date=date(2025, 1, 9),
            status=RequestStatus.APPROVED,
            action_by_user_id="lead",
        )

        assert set(request.model_dump()) == {
            "id",
            "user_id",
            "start_date",
            "end_date",
            "status",
        }
        assert request.is_approved
