# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from timeledger.api.v1 import freeze, holidays, reports

api_router = APIRouter()

# Report routes
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])

# Holiday calendar routes
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])

# Freeze window routes
api_router.include_router(freeze.router, prefix="/freeze", tags=["freeze"])
