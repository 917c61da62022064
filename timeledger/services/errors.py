# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by the reporting services."""


class ReportDataError(ValueError):
    """Input data cannot produce a consistent report."""
