"""
Chat thread API endpoints: messages of one thread (oldest first), append.
"""

from __future__ import annotations

from records.router import build_router

from .schemas import ENTITY

router = build_router(ENTITY, prefix="/api/chat-threads")
