"""
Chat thread message wire models and table mapping.
"""

from __future__ import annotations

from datetime import datetime

from records.entity import Entity, WireModel


class ChatMessageIn(WireModel):
    # Groups messages into one conversation; opaque to the API.
    chat_key: str = ""
    who: str = ""
    msg: str = ""
    customer: str = ""


class ChatMessage(ChatMessageIn):
    id: int
    timestamp: datetime | None = None


ENTITY = Entity(
    name="chat_message",
    table="chat_threads",
    write_model=ChatMessageIn,
    read_model=ChatMessage,
    columns={
        "chat_key": "chat_key",
        "who": "who",
        "msg": "msg",
        "customer": "customer",
    },
    generated={"timestamp": "timestamp"},
    order_by=(("timestamp", False), ("id", False)),
    filter_field="chat_key",
)
