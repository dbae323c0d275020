# =============================================================================
# core/models/base.py - Shared Row Behaviour
# =============================================================================
# Every household entity maps 1:1 to a Supabase table. Records are frozen
# pydantic models: to change a row, build a copy with model_copy(update=...)
# and push the full copy back to the server.
#
# Field names ARE the snake_case column names, so a PostgREST row dict
# validates directly into a record and dumps straight back out.
# =============================================================================

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    Base class for one persisted row.

    Subclasses set `table_name` and list any columns the database fills in
    (ids, timestamps, generated codes) in `server_generated`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    table_name: ClassVar[str]
    server_generated: ClassVar[tuple[str, ...]] = ("id",)
    # Set once on insert; an update never blanks them
    write_once: ClassVar[tuple[str, ...]] = ()

    # Empty until the row has been inserted
    id: str = Field(
        default="",
        description="Primary key (assigned by the database on insert)"
    )

    @classmethod
    def from_row(cls, row: dict[str, Any]):
        """Build a record from a PostgREST response row."""
        return cls.model_validate(row)

    def to_insert_row(self) -> dict[str, Any]:
        """
        Payload for an insert.

        Server-generated columns are left out while unset so the
        database defaults (gen_random_uuid(), now(), ...) apply.
        """
        row = self.model_dump(mode="json")
        for column in self.server_generated:
            if not row.get(column):
                row.pop(column, None)
        return row

    def to_update_row(self) -> dict[str, Any]:
        """
        Full-record payload for an update; the row is matched on id.

        Server-generated and write-once columns that are unset on this copy
        are left out, so the stored values survive a partial record.
        """
        row = self.model_dump(mode="json")
        row.pop("id", None)
        for column in (*self.server_generated, *self.write_once):
            if not row.get(column):
                row.pop(column, None)
        return row


class TimestampedRecord(Record):
    """Record with a creator and a server-assigned creation time."""

    server_generated: ClassVar[tuple[str, ...]] = ("id", "created_at")
    write_once: ClassVar[tuple[str, ...]] = ("created_by",)

    created_by: str = Field(
        default="",
        description="Auth user id of the row's creator"
    )

    created_at: datetime | None = Field(
        default=None,
        description="Set by the database on insert"
    )


def record_id(item: "Record | str") -> str:
    """Identity of a record, or the id itself when one is passed."""
    if isinstance(item, Record):
        return item.id
    return str(item)
