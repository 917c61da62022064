# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Freeze window API endpoints."""

from fastapi import APIRouter

from timeledger.schemas.freeze import FreezeCheckRequest, FreezeCheckResponse
from timeledger.services import freeze_service

router = APIRouter()


@router.post("/check", response_model=FreezeCheckResponse)
def check_frozen_dates(data: FreezeCheckRequest) -> FreezeCheckResponse:
    """Check which dates of a member are locked for editing."""
    results = freeze_service.check_dates(
        data.dates, data.member, data.rules, today=data.today
    )
    return FreezeCheckResponse(results=results)
