"""
Sample data for a fresh database.

A table is seeded only while it is empty, so restarts never duplicate rows
and user data is never mixed with samples. Failures are logged and skipped;
seeding never blocks startup.
"""

from __future__ import annotations

import logging
from typing import Any

from activity_log.schemas import ENTITY as ACTIVITY_LOG
from backlog.schemas import ENTITY as BACKLOG
from core.errors import StoreError
from developers.schemas import ENTITY as DEVELOPERS
from records.entity import Entity
from records.repository import RecordRepository

logger = logging.getLogger(__name__)


SAMPLE_DEVELOPERS: list[dict[str, Any]] = [
    {
        "name": "Jane",
        "avatar": "https://i.pravatar.cc/40?img=1",
        "done": 7,
        "quick_fix": "Login bug",
        "primary_task": "Refactor Auth",
        "secondary_task": "Optimize DB",
        "status": "active",
    },
    {
        "name": "Mike",
        "avatar": "https://i.pravatar.cc/40?img=2",
        "done": 3,
        "quick_fix": "UI glitch",
        "primary_task": "Build API",
        "secondary_task": "Write tests",
        "status": "active",
    },
    {
        "name": "Sara",
        "avatar": "https://i.pravatar.cc/40?img=3",
        "done": 5,
        "quick_fix": "Navbar flicker",
        "primary_task": "New dashboard",
        "secondary_task": "Clean CSS",
        "status": "busy",
    },
    {
        "name": "Liam",
        "avatar": "https://i.pravatar.cc/40?img=4",
        "done": 2,
        "quick_fix": "404 page issue",
        "primary_task": "Deploy flow",
        "secondary_task": "Docker cleanup",
        "status": "active",
    },
]

SAMPLE_BACKLOG: list[dict[str, Any]] = [
    {"task": "Fix dark mode", "priority": "medium", "estimated_hours": 4},
    {"task": "Style guide", "priority": "low", "estimated_hours": 8},
    {"task": "Audit logging", "priority": "high", "estimated_hours": 6},
    {"task": "User search", "priority": "medium", "estimated_hours": 3},
]

SAMPLE_ACTIVITY_LOG: list[dict[str, Any]] = [
    {"name": "System", "task_type": "setup", "task_name": "Database initialized", "type": "system"},
    {"name": "Jane", "task_type": "completion", "task_name": "Login bug", "type": "completion"},
    {"name": "Mike", "task_type": "completion", "task_name": "UI glitch", "type": "completion"},
]

# Rows are column -> value, ready for `RecordRepository.insert`.
SAMPLES: tuple[tuple[Entity, list[dict[str, Any]]], ...] = (
    (DEVELOPERS, SAMPLE_DEVELOPERS),
    (BACKLOG, SAMPLE_BACKLOG),
    (ACTIVITY_LOG, SAMPLE_ACTIVITY_LOG),
)


async def seed_table(repository: RecordRepository, entity: Entity, rows: list[dict[str, Any]]) -> int:
    """
    Insert `rows` when the table is empty. Returns how many were inserted.
    """
    try:
        existing = await repository.count(entity)
    except StoreError:
        logger.warning("seed_count_failed table=%s", entity.table, exc_info=True)
        return 0

    if existing > 0:
        logger.info("seed_skipped table=%s existing=%s", entity.table, existing)
        return 0

    inserted = 0
    for row in rows:
        try:
            await repository.insert(entity, row)
        except StoreError:
            logger.warning("seed_row_failed table=%s row=%s", entity.table, row, exc_info=True)
            continue
        inserted += 1

    logger.info("seed_complete table=%s inserted=%s", entity.table, inserted)
    return inserted


async def seed_sample_data(repository: RecordRepository) -> dict[str, int]:
    return {entity.table: await seed_table(repository, entity, rows) for entity, rows in SAMPLES}
