# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role-based visibility of members."""

from collections.abc import Iterable

from timeledger.models.enums import Role
from timeledger.schemas.member import Member


def find_member(members: Iterable[Member], member_id: str | None) -> Member | None:
    """Look up a member by id."""
    if member_id is None:
        return None
    return next((m for m in members if m.id == member_id), None)


def visible_members(viewer: Member, members: Iterable[Member]) -> list[Member]:
    """Members whose hours a viewer may see.

    - Super Admin: everyone
    - Team Lead: self and direct reports
    - Employee: self only

    Args:
        viewer: The member looking at the report.
        members: All members.

    Returns:
        Members deduplicated by id, in first-seen order.
    """
    if viewer.role == Role.SUPER_ADMIN:
        candidates = list(members)
    elif viewer.role == Role.TEAM_LEAD:
        candidates = [viewer] + [m for m in members if m.reports_to == viewer.id]
    else:
        candidates = [viewer]

    unique: dict[str, Member] = {}
    for member in candidates:
        unique.setdefault(member.id, member)
    return list(unique.values())


def can_edit_entries(viewer: Member, target: Member) -> bool:
    """Check if a viewer may edit or delete a member's time entries."""
    if viewer.role == Role.SUPER_ADMIN:
        return True
    if viewer.id == target.id:
        return True
    return viewer.role == Role.TEAM_LEAD and target.reports_to == viewer.id


def resolve_target_member(
    viewer: Member | None,
    members: Iterable[Member],
    target_user_id: str | None = None,
) -> Member | None:
    """Pick the member shown in the individual report.

    Without a target the viewer sees their own report. A target outside the
    viewer's visible set resolves to None.
    """
    if viewer is None:
        return None
    if target_user_id is None:
        return viewer
    return find_member(visible_members(viewer, members), target_user_id)
