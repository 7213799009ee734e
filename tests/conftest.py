from __future__ import annotations

import itertools
import re
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.errors import StoreError
from main import create_app
from records.entity import Entity

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class InMemoryRepository:
    """
    Stand-in for `RecordRepository` that keeps rows in dicts.

    Mirrors the store's behaviour: serial ids per table, generated columns
    stamped on insert, ordering/filtering taken from the entity.
    """

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self._ids: dict[str, int] = defaultdict(int)
        self._clock = itertools.count()
        self.fail_with: StoreError | None = None
        self.statements = 0

    def _statement(self) -> None:
        self.statements += 1
        if self.fail_with is not None:
            raise self.fail_with

    def now(self) -> datetime:
        return BASE_TIME + timedelta(seconds=next(self._clock))

    def add_row(self, entity: Entity, row: dict[str, Any]) -> dict[str, Any]:
        self._ids[entity.table] += 1
        stored = {"id": self._ids[entity.table], **row}
        self.tables[entity.table].append(stored)
        return stored

    async def insert(self, entity: Entity, values: dict[str, Any]) -> dict[str, Any]:
        self._statement()
        row = dict(values)
        for column in entity.generated.values():
            row[column] = self.now()
        return dict(self.add_row(entity, row))

    async def list(self, entity: Entity, *, filter_value: Any = None) -> list[dict[str, Any]]:
        self._statement()
        rows = [dict(r) for r in self.tables[entity.table]]
        if entity.filter_field is not None:
            column = entity.column_for(entity.filter_field)
            rows = [r for r in rows if r[column] == filter_value]
        for column, descending in reversed(entity.order_by):
            rows.sort(key=lambda r: r[column], reverse=descending)
        return rows

    async def count(self, entity: Entity) -> int:
        self._statement()
        return len(self.tables[entity.table])

    async def update(self, entity: Entity, record_id: int, values: dict[str, Any]) -> int:
        self._statement()
        affected = 0
        for row in self.tables[entity.table]:
            if row["id"] == record_id:
                row.update(values)
                affected += 1
        return affected

    async def delete(self, entity: Entity, record_id: int) -> int:
        self._statement()
        before = len(self.tables[entity.table])
        self.tables[entity.table] = [r for r in self.tables[entity.table] if r["id"] != record_id]
        return before - len(self.tables[entity.table])


class RecordingDatabase:
    """
    Captures SQL sent through the `Database` interface and replays canned results.
    """

    def __init__(self, *, rows: list[dict[str, Any]] | None = None, status: str = "") -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.rows = rows or []
        self.status = status

    @staticmethod
    def _normalize(sql: str) -> str:
        return re.sub(r"\s+", " ", sql).strip()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self.calls.append(("fetch_one", self._normalize(sql), args))
        return self.rows[0] if self.rows else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.calls.append(("fetch_all", self._normalize(sql), args))
        return list(self.rows)

    async def execute(self, sql: str, *args: Any) -> str:
        self.calls.append(("execute", self._normalize(sql), args))
        return self.status


@pytest.fixture()
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture()
def settings() -> Settings:
    return Settings(max_body_bytes=4096)


@pytest.fixture()
def client(repository, settings):
    app = create_app(settings=settings, repository=repository)
    with TestClient(app) as test_client:
        yield test_client
