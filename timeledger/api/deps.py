# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from timeledger.config import Settings, get_settings
from timeledger.schemas.report import ReportSnapshot


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


def with_default_allowance(
    snapshot: ReportSnapshot,
    settings: Settings,
) -> ReportSnapshot:
    """Fill in the configured leave allowance when the snapshot has none."""
    if snapshot.annual_leave_allowance is not None:
        return snapshot
    return snapshot.model_copy(
        update={"annual_leave_allowance": settings.annual_leave_allowance}
    )

