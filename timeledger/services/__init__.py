# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from timeledger.services import (
    access_service,
    calendar_utils,
    expected_hours,
    export_service,
    freeze_service,
    holiday_service,
    leave_service,
    report_service,
)
from timeledger.services.errors import ReportDataError

__all__ = [
    "ReportDataError",
    "access_service",
    "calendar_utils",
    "expected_hours",
    "export_service",
    "freeze_service",
    "holiday_service",
    "leave_service",
    "report_service",
]
