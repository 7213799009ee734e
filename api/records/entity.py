"""
Entity descriptors: the mapping between a wire model and a table row.

Each collection (developers, backlog, ...) declares one `Entity`. The generic
repository and router read everything they need from it, so the four
collections share one code path instead of four copies.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for request/response bodies: snake_case attributes, camelCase JSON.
    Unknown keys in request bodies are ignored; a JSON null stands for the
    field default.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field_info = cls.model_fields[info.field_name]
            if not field_info.is_required():
                return field_info.get_default(call_default_factory=True)
        return value


class Capability(str, enum.Enum):
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Entity:
    name: str
    table: str
    write_model: type[WireModel]
    read_model: type[WireModel]
    # attribute -> column, for fields the client writes
    columns: dict[str, str]
    # attribute -> column, for fields the store assigns on insert
    generated: dict[str, str] = field(default_factory=dict)
    # (column, descending) pairs
    order_by: tuple[tuple[str, bool], ...] = (("id", False),)
    # attribute used to select a subset on list, taken from the path
    filter_field: str | None = None
    capabilities: frozenset[Capability] = frozenset({Capability.LIST, Capability.CREATE})

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def column_for(self, attribute: str) -> str:
        if attribute == "id":
            return "id"
        if attribute in self.columns:
            return self.columns[attribute]
        return self.generated[attribute]

    def select_columns(self) -> list[str]:
        return ["id", *self.columns.values(), *self.generated.values()]

    def to_row(self, payload: WireModel) -> dict[str, Any]:
        """
        Decoded request body -> column values, in declaration order.
        """
        return {column: getattr(payload, attribute) for attribute, column in self.columns.items()}

    def from_row(self, row: dict[str, Any]) -> WireModel:
        values = {"id": row["id"]}
        for attribute, column in (*self.columns.items(), *self.generated.items()):
            # NULL columns fall back to the model default.
            if row.get(column) is not None:
                values[attribute] = row[column]
        return self.read_model.model_validate(values)

    def echo(self, record_id: int, payload: WireModel) -> WireModel:
        """
        Client payload stamped with an identity, for handlers that do not read back.
        """
        return self.read_model.model_validate({"id": record_id, **payload.model_dump()})
