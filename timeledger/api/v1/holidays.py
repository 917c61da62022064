# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from timeledger.api.deps import get_app_settings
from timeledger.config import Settings
from timeledger.schemas.holiday import PublicHoliday
from timeledger.services import holiday_service

router = APIRouter()


@router.get("/public/{year}", response_model=list[PublicHoliday])
def list_public_holidays(
    year: int = Path(..., ge=1, le=9999),
    country: str | None = Query(None, min_length=2, max_length=3),
    subdiv: str | None = Query(None),
    settings: Settings = Depends(get_app_settings),
) -> list[PublicHoliday]:
    """List the public holidays of a country for a year.

    Country and subdivision default to the configured calendar.
    """
    country = (country or settings.holiday_country).upper()
    if subdiv is None and country == settings.holiday_country.upper():
        subdiv = settings.holiday_subdivision

    try:
        return holiday_service.public_holidays_for_year(year, country, subdiv)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from None
