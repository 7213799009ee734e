"""
Backlog item wire models and table mapping.
"""

from __future__ import annotations

from datetime import datetime

from records.entity import Capability, Entity, WireModel


class BacklogItemIn(WireModel):
    task: str = ""
    priority: str = ""
    estimated_hours: int = 0


class BacklogItem(BacklogItemIn):
    id: int
    created_at: datetime | None = None


ENTITY = Entity(
    name="backlog_item",
    table="backlog",
    write_model=BacklogItemIn,
    read_model=BacklogItem,
    columns={
        "task": "task",
        "priority": "priority",
        "estimated_hours": "estimated_hours",
    },
    generated={"created_at": "created_at"},
    capabilities=frozenset({Capability.LIST, Capability.CREATE, Capability.DELETE}),
)
