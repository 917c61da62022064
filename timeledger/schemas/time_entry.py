# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry schemas."""

import datetime

from pydantic import BaseModel, Field


class TimeEntry(BaseModel):
    """Hours logged by a member on one calendar day.

    The task label encodes "Project - Task". Explicit project/task_name
    values take precedence over the label when provided.
    """

    id: str
    user_id: str
    date: datetime.date
    start_time: datetime.time | None = None
    end_time: datetime.time | None = None
    task: str = ""
    project: str | None = None
    task_name: str | None = None
    duration: float = Field(..., ge=0)
    remarks: str | None = None
