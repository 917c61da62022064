# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team report spreadsheet export."""

import io
import logging
from calendar import month_name
from datetime import date

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet
from slugify import slugify

from timeledger.models.enums import PeriodKind
from timeledger.schemas.report import TeamReport
from timeledger.services.errors import ReportDataError

logger = logging.getLogger(__name__)

TOTAL_TIME_SHEET = "Total Time"
PROJECT_SHEET = "Project Level Report"
TASK_SHEET = "Task Level Report"

HOURS_FORMAT = "#,##0.00"

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")
BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)


def report_title(report: TeamReport) -> str:
    """Human readable title of a team report's period."""
    period = report.period
    if period.kind == PeriodKind.YEAR:
        return f"Report for {period.year}"

    month_label = f"{month_name[report.period_start.month]} {period.year}"
    if period.kind == PeriodKind.MONTH:
        return f"Report for {month_label}"

    week_number = (period.week_index or 0) + 1
    return (
        f"Report for week {week_number} "
        f"({report.period_start.day}-{report.period_end.day}) of {month_label}"
    )


def export_filename(today: date | None = None, prefix: str = "team report") -> str:
    """Get the filename for an exported team report."""
    today = today or date.today()
    slug = slugify(prefix, lowercase=True, separator="_")
    return f"{slug}_{today.strftime('%Y-%m-%d')}.xlsx"


def _write_sheet(
    ws: Worksheet,
    title: str,
    headers: list[str],
    rows: list[list],
    column_widths: list[int],
) -> None:
    """Fill a sheet with a title row, a styled header and hour columns."""
    last_column = get_column_letter(len(headers))
    ws.merge_cells(f"A1:{last_column}1")
    title_cell = ws["A1"]
    title_cell.value = title
    title_cell.font = Font(bold=True, size=14)
    title_cell.alignment = Alignment(horizontal="center")

    header_row = 3
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=header_row, column=col, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = BORDER

    for idx, values in enumerate(rows, 1):
        row = header_row + idx
        for col, value in enumerate(values, 1):
            cell = ws.cell(row=row, column=col, value=value)
            if isinstance(value, float):
                cell.number_format = HOURS_FORMAT
            cell.border = BORDER

    for col, width in enumerate(column_widths, 1):
        ws.column_dimensions[get_column_letter(col)].width = width


def create_team_report_workbook(report: TeamReport, title: str | None = None) -> bytes:
    """Create the team report spreadsheet.

    Three sheets: consolidated hours per member, hours per project and hours
    per task.

    Args:
        report: The team report to export.
        title: Title of the first sheet; defaults to the period title.

    Returns:
        The xlsx file contents.

    Raises:
        ReportDataError: If the report has no consolidated rows.
    """
    if not report.consolidated:
        raise ReportDataError("Team report has no rows to export")

    title = title or report_title(report)

    wb = Workbook()
    ws = wb.active
    ws.title = TOTAL_TIME_SHEET
    _write_sheet(
        ws,
        title,
        ["Member", "Role", "Assigned", "Leave", "Expected", "Logged", "Remaining"],
        [
            [
                row.name,
                row.role.value,
                float(row.assigned_hours),
                float(row.leave_hours),
                float(row.expected_hours),
                float(row.logged_hours),
                float(row.remaining_hours),
            ]
            for row in report.consolidated
        ],
        [25, 14, 12, 12, 12, 12, 12],
    )

    _write_sheet(
        wb.create_sheet(PROJECT_SHEET),
        PROJECT_SHEET,
        ["Member", "Role", "Project", "Logged"],
        [
            [row.member_name, row.role.value, row.project_name, float(row.logged_hours)]
            for row in report.by_project
        ],
        [25, 14, 30, 12],
    )

    _write_sheet(
        wb.create_sheet(TASK_SHEET),
        TASK_SHEET,
        ["Member", "Role", "Task", "Logged"],
        [
            [row.member_name, row.role.value, row.task_name, float(row.logged_hours)]
            for row in report.by_task
        ],
        [25, 14, 30, 12],
    )

    logger.info(
        f"Exported team report '{title}' with {len(report.consolidated)} members"
    )

    output = io.BytesIO()
    wb.save(output)
    return output.getvalue()
