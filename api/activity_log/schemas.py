"""
Activity log wire models and table mapping.

Entries are append-only. `date` is assigned by the database on insert; a
client-supplied value is ignored.
"""

from __future__ import annotations

from datetime import datetime

from records.entity import Entity, WireModel


class ActivityLogEntryIn(WireModel):
    name: str = ""
    task_type: str = ""
    task_name: str = ""
    type: str = ""


class ActivityLogEntry(ActivityLogEntryIn):
    id: int
    date: datetime | None = None


ENTITY = Entity(
    name="activity_log_entry",
    table="activity_log",
    write_model=ActivityLogEntryIn,
    read_model=ActivityLogEntry,
    columns={
        "name": "name",
        "task_type": "task_type",
        "task_name": "task_name",
        "type": "type",
    },
    generated={"date": "date"},
    order_by=(("date", True), ("id", True)),
)
