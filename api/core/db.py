"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. The application creates exactly one
during startup (see `bootstrap/schema.py`) and closes it on shutdown
(see `api/main.py`); it is handed to whatever needs it rather than living in
a module global.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Driver exceptions are translated into `core.errors.StoreError`.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from .config import Settings
from .errors import translate_store_errors


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def rows_affected(status: str) -> int:
    """
    Parse an asyncpg command status such as "UPDATE 1" or "INSERT 0 3".
    """
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool: asyncpg.Pool | None = pool

    @classmethod
    async def connect(cls, settings: Settings) -> Database:
        pool = await asyncpg.create_pool(
            host=settings.db_host,
            port=settings.db_port,
            user=settings.db_user,
            password=settings.db_password,
            database=settings.db_name,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        return cls(pool)

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is closed.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with translate_store_errors():
            row = await self.pool().fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with translate_store_errors():
            rows = await self.pool().fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return its command status.
        """
        with translate_store_errors():
            return await self.pool().execute(sql, *args)
