# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from timeledger.api.deps import get_app_settings, with_default_allowance
from timeledger.config import Settings
from timeledger.schemas.report import (
    IndividualReport,
    IndividualReportRequest,
    TeamReport,
    TeamReportRequest,
)
from timeledger.services import export_service, report_service

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _team_report(data: TeamReportRequest, settings: Settings) -> TeamReport:
    try:
        return report_service.build_team_report(
            with_default_allowance(data.snapshot, settings),
            data.viewer_id,
            data.period,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from None


@router.post("/individual", response_model=IndividualReport)
def individual_report(
    data: IndividualReportRequest,
    settings: Settings = Depends(get_app_settings),
) -> IndividualReport:
    """Get the month calendar report of one member."""
    try:
        return report_service.build_individual_report(
            with_default_allowance(data.snapshot, settings),
            data.viewer_id,
            data.year,
            data.month,
            target_user_id=data.target_user_id,
            today=data.today,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from None


@router.post("/team", response_model=TeamReport)
def team_report(
    data: TeamReportRequest,
    settings: Settings = Depends(get_app_settings),
) -> TeamReport:
    """Get consolidated, project and task hours of the viewer's team."""
    return _team_report(data, settings)


@router.post("/team/export")
def export_team_report(
    data: TeamReportRequest,
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Download the team report as an Excel workbook."""
    report = _team_report(data, settings)
    try:
        content = export_service.create_team_report_workbook(report)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from None

    filename = export_service.export_filename(data.today)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
