# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from datetime import date

import pytest
from fastapi.testclient import TestClient

from timeledger.api.deps import get_app_settings
from timeledger.config import Settings
from timeledger.main import app
from timeledger.models.enums import HolidayType, RequestStatus, Role
from timeledger.schemas.holiday import CustomHoliday, HolidayRequest, PublicHoliday
from timeledger.schemas.member import Contract, Member
from timeledger.schemas.report import ReportSnapshot
from timeledger.schemas.time_entry import TimeEntry


def make_member(
    member_id: str,
    name: str,
    role: Role = Role.EMPLOYEE,
    reports_to: str | None = None,
    team_id: str | None = None,
    weekly_hours: float = 40,
    start_date: date = date(2024, 1, 1),
    end_date: date | None = None,
) -> Member:
    return Member(
        id=member_id,
        name=name,
        email=f"{member_id}@example.com",
        role=role,
        reports_to=reports_to,
        team_id=team_id,
        contract=Contract(
            start_date=start_date, end_date=end_date, weekly_hours=weekly_hours
        ),
    )


def make_entry(
    entry_id: str, user_id: str, day: date, task: str, duration: float
) -> TimeEntry:
    return TimeEntry(id=entry_id, user_id=user_id, date=day, task=task, duration=duration)


@pytest.fixture
def admin() -> Member:
    """Super admin without a team."""
    return make_member("admin", "Zoe Admin", role=Role.SUPER_ADMIN)


@pytest.fixture
def lead() -> Member:
    """Team lead of team-a."""
    return make_member(
        "lead", "Lena Lead", role=Role.TEAM_LEAD, reports_to="admin", team_id="team-a"
    )


@pytest.fixture
def anna() -> Member:
    """Full-time employee reporting to the lead."""
    return make_member("anna", "Anna Employee", reports_to="lead", team_id="team-a")


@pytest.fixture
def bob() -> Member:
    """Part-time employee reporting to the lead (lowercase name)."""
    return make_member(
        "bob", "bob builder", reports_to="lead", team_id="team-a", weekly_hours=20
    )


@pytest.fixture
def carl() -> Member:
    """Employee of another team reporting to the admin."""
    return make_member("carl", "Carl Other", reports_to="admin", team_id="team-b")


@pytest.fixture
def members(admin, lead, anna, bob, carl) -> list[Member]:
    return [admin, lead, anna, bob, carl]


@pytest.fixture
def public_holidays() -> list[PublicHoliday]:
    """New Year (Wed) and Epiphany (Mon) 2025."""
    return [
        PublicHoliday(id="ph-1", country="AT", name="Neujahr", date=date(2025, 1, 1)),
        PublicHoliday(
            id="ph-2", country="AT", name="Heilige Drei Koenige", date=date(2025, 1, 6)
        ),
    ]


@pytest.fixture
def custom_holidays() -> list[CustomHoliday]:
    """Half-day team event for team-a on Friday, January 24 2025."""
    return [
        CustomHoliday(
            id="ch-1",
            name="Team Day",
            date=date(2025, 1, 24),
            type=HolidayType.HALF_DAY,
            applies_to="team-a",
        ),
    ]


@pytest.fixture
def holiday_requests() -> list[HolidayRequest]:
    """Anna: approved Thu 9 to Sun 12 January, pending on the 20th."""
    return [
        HolidayRequest(
            id="hr-1",
            user_id="anna",
            start_date=date(2025, 1, 9),
            end_date=date(2025, 1, 12),
            status=RequestStatus.APPROVED,
        ),
        HolidayRequest(
            id="hr-2",
            user_id="anna",
            start_date=date(2025, 1, 20),
            end_date=date(2025, 1, 20),
            status=RequestStatus.PENDING,
        ),
    ]


@pytest.fixture
def time_entries() -> list[TimeEntry]:
    return [
        make_entry("te-1", "anna", date(2025, 1, 2), "Apollo - Design", 8),
        make_entry("te-2", "anna", date(2025, 1, 3), "Apollo - Review", 6),
        make_entry("te-3", "anna", date(2025, 1, 3), "Hermes", 2),
        make_entry("te-4", "anna", date(2025, 2, 3), "Apollo - Design", 8),
        make_entry("te-5", "bob", date(2025, 1, 2), "Apollo - Design", 4),
        make_entry("te-6", "carl", date(2025, 1, 7), "Zeus - Ops", 8),
        make_entry("te-7", "ghost", date(2025, 1, 7), "Apollo - Design", 3),
    ]


@pytest.fixture
def snapshot(
    members, time_entries, holiday_requests, public_holidays, custom_holidays
) -> ReportSnapshot:
    """January 2025 data set with a 25 day leave allowance."""
    return ReportSnapshot(
        members=members,
        time_entries=time_entries,
        holiday_requests=holiday_requests,
        public_holidays=public_holidays,
        custom_holidays=custom_holidays,
        annual_leave_allowance=25,
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        annual_leave_allowance=0,
        holiday_country="AT",
        holiday_subdivision=None,
    )


@pytest.fixture(scope="function")
def client(test_settings):
    """Create a test client with settings override."""
    app.dependency_overrides[get_app_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
