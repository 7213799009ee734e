"""
Store error taxonomy.

asyncpg raises a deep exception hierarchy; callers only ever see `StoreError`
with one of a few categories. The HTTP layer turns the category into a fixed
status and message, so driver text never reaches clients.
"""

from __future__ import annotations

import asyncio
import enum
from contextlib import contextmanager
from typing import Iterator

import asyncpg


class StoreErrorCategory(str, enum.Enum):
    UNAVAILABLE = "unavailable"
    CONFLICT = "conflict"
    INVALID = "invalid"
    INTERNAL = "internal"


_STATUS = {
    StoreErrorCategory.UNAVAILABLE: 503,
    StoreErrorCategory.CONFLICT: 409,
    StoreErrorCategory.INVALID: 400,
    StoreErrorCategory.INTERNAL: 500,
}

_MESSAGE = {
    StoreErrorCategory.UNAVAILABLE: "Database is unavailable.",
    StoreErrorCategory.CONFLICT: "Record conflicts with existing data.",
    StoreErrorCategory.INVALID: "Record contains values the database rejected.",
    StoreErrorCategory.INTERNAL: "Database error.",
}

# Everything the driver can raise out of a pool call.
DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class StoreError(RuntimeError):
    def __init__(self, category: StoreErrorCategory, detail: str = "") -> None:
        super().__init__(detail or _MESSAGE[category])
        self.category = category
        self.detail = detail

    @property
    def status_code(self) -> int:
        return _STATUS[self.category]

    @property
    def public_message(self) -> str:
        return _MESSAGE[self.category]


def classify(exc: BaseException) -> StoreErrorCategory:
    if isinstance(exc, asyncpg.UniqueViolationError):
        return StoreErrorCategory.CONFLICT
    if isinstance(exc, (asyncpg.IntegrityConstraintViolationError, asyncpg.DataError)):
        return StoreErrorCategory.INVALID
    if isinstance(exc, (asyncpg.PostgresConnectionError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)):
        return StoreErrorCategory.UNAVAILABLE
    return StoreErrorCategory.INTERNAL


@contextmanager
def translate_store_errors() -> Iterator[None]:
    try:
        yield
    except DRIVER_ERRORS as exc:
        raise StoreError(classify(exc), f"{type(exc).__name__}: {exc}") from exc
