# =============================================================================
# core/models/group.py - Household Group Schemas
# =============================================================================
# A group is a household. Membership rows (group_members) grant a user
# access to the group's shared recipes, todos and meal plans.
#
#   groups 1 --- N group_members
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import Field

from .base import Record, TimestampedRecord


class GroupRole(str, Enum):
    """
    Role of a user inside a group.

    - owner: created the group (added automatically on creation)
    - member: joined through the invite code
    """
    OWNER = "owner"
    MEMBER = "member"


class Group(TimestampedRecord):
    """
    A household group.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Nine West",
            "invite_code": "a1b2c3d4",
            "created_by": "9f1c...",
            "created_at": "2024-01-15T10:30:00Z"
        }
    """

    table_name: ClassVar[str] = "groups"
    server_generated: ClassVar[tuple[str, ...]] = ("id", "created_at", "invite_code")

    name: str = Field(
        ...,
        description="Display name of the group"
    )

    # Generated by the database; shared out-of-band to let others join
    invite_code: str | None = Field(
        default=None,
        description="Opaque code that lets a user join without prior membership"
    )


class GroupMember(Record):
    """Join row linking a user to a group."""

    table_name: ClassVar[str] = "group_members"
    server_generated: ClassVar[tuple[str, ...]] = ("id", "joined_at")

    group_id: str
    user_id: str
    role: GroupRole = GroupRole.MEMBER
    joined_at: datetime | None = None
