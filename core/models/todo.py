# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from .base import TimestampedRecord


class TodoItem(TimestampedRecord):
    """
    A household todo.

    Lists show incomplete items first, then higher priority, then newest.
    """

    table_name: ClassVar[str] = "todos"

    group_id: str | None = None

    title: str = Field(
        ...,
        description="What needs doing"
    )

    is_completed: bool = False

    priority: int = Field(
        default=0,
        description="Higher numbers sort first"
    )

    due_date: datetime | None = None
