"""
Request-scoped access to the shared record repository.
"""

from __future__ import annotations

from fastapi import Request

from core.errors import StoreError, StoreErrorCategory

from .repository import RecordRepository


def get_repository(request: Request) -> RecordRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise StoreError(StoreErrorCategory.UNAVAILABLE, "Repository is not initialized.")
    return repository
