"""
Record persistence (raw SQL) shared by every entity.

SQL is built from the `Entity` descriptor; table and column names come from
code, never from requests. Every method issues exactly one statement.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database, rows_affected

from .entity import Entity

logger = logging.getLogger(__name__)


def _order_clause(entity: Entity) -> str:
    parts = [f"{column} {'DESC' if descending else 'ASC'}" for column, descending in entity.order_by]
    return ", ".join(parts)


class RecordRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def insert(self, entity: Entity, values: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one row; returns it with store-assigned id and defaults.
        """
        columns = list(values)
        placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
        row = await self.db.fetch_one(
            f"""
            INSERT INTO {entity.table} ({", ".join(columns)})
            VALUES ({placeholders})
            RETURNING {", ".join(entity.select_columns())}
            """,
            *values.values(),
        )
        if row is None:
            raise RuntimeError(f"Failed to insert {entity.name}.")
        return row

    async def list(self, entity: Entity, *, filter_value: Any = None) -> list[dict[str, Any]]:
        where = ""
        args: list[Any] = []
        if entity.filter_field is not None:
            where = f"WHERE {entity.column_for(entity.filter_field)} = $1"
            args.append(filter_value)
        return await self.db.fetch_all(
            f"""
            SELECT {", ".join(entity.select_columns())}
            FROM {entity.table}
            {where}
            ORDER BY {_order_clause(entity)}
            """,
            *args,
        )

    async def count(self, entity: Entity) -> int:
        row = await self.db.fetch_one(f"SELECT count(*) AS n FROM {entity.table}")
        return int(row["n"]) if row is not None else 0

    async def update(self, entity: Entity, record_id: int, values: dict[str, Any]) -> int:
        """
        Full-row update. Returns the number of rows affected (0 when the id is unknown).
        """
        assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(values, start=1))
        status = await self.db.execute(
            f"""
            UPDATE {entity.table}
            SET {assignments}
            WHERE id = ${len(values) + 1}
            """,
            *values.values(),
            record_id,
        )
        affected = rows_affected(status)
        if affected == 0:
            logger.info("update_no_rows entity=%s id=%s", entity.name, record_id)
        return affected

    async def delete(self, entity: Entity, record_id: int) -> int:
        status = await self.db.execute(f"DELETE FROM {entity.table} WHERE id = $1", record_id)
        affected = rows_affected(status)
        if affected == 0:
            logger.info("delete_no_rows entity=%s id=%s", entity.name, record_id)
        return affected
