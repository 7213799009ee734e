"""
Backlog API endpoints: list, create, delete.
"""

from __future__ import annotations

from records.router import build_router

from .schemas import ENTITY

router = build_router(ENTITY, prefix="/api/backlog")
