"""
Developer wire models and table mapping.
"""

from __future__ import annotations

from datetime import datetime

from records.entity import Capability, Entity, WireModel


class DeveloperIn(WireModel):
    name: str = ""
    avatar: str = ""
    done: int = 0
    quick_fix: str = ""
    primary: str = ""
    secondary: str = ""
    status: str = ""


class Developer(DeveloperIn):
    id: int
    # Absent on update responses, which echo the request instead of reading back.
    created_at: datetime | None = None


ENTITY = Entity(
    name="developer",
    table="developers",
    write_model=DeveloperIn,
    read_model=Developer,
    columns={
        "name": "name",
        "avatar": "avatar",
        "done": "done",
        "quick_fix": "quick_fix",
        "primary": "primary_task",
        "secondary": "secondary_task",
        "status": "status",
    },
    generated={"created_at": "created_at"},
    capabilities=frozenset({Capability.LIST, Capability.CREATE, Capability.UPDATE}),
)
