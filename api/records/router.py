"""
Router factory: list/create/update/delete endpoints for one entity.

Only the operations in `entity.capabilities` are registered. This module
does not use postponed annotations because FastAPI must see the concrete
pydantic classes held in local variables.
"""

from fastapi import APIRouter, Depends, Response, status

from .dependencies import get_repository
from .entity import Capability, Entity
from .repository import RecordRepository


def build_router(entity: Entity, *, prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix)
    read_model = entity.read_model
    write_model = entity.write_model

    if entity.supports(Capability.LIST) and entity.filter_field is None:

        @router.get(
            "",
            name=f"list_{entity.name}",
            response_model=list[read_model],
            response_model_exclude_none=True,
        )
        async def list_records(repository: RecordRepository = Depends(get_repository)):
            rows = await repository.list(entity)
            return [entity.from_row(row) for row in rows]

    elif entity.supports(Capability.LIST):

        @router.get(
            "/{key}",
            name=f"list_{entity.name}",
            response_model=list[read_model],
            response_model_exclude_none=True,
        )
        async def list_records_by_key(key: str, repository: RecordRepository = Depends(get_repository)):
            rows = await repository.list(entity, filter_value=key)
            return [entity.from_row(row) for row in rows]

    if entity.supports(Capability.CREATE):

        @router.post(
            "",
            name=f"create_{entity.name}",
            status_code=status.HTTP_201_CREATED,
            response_model=read_model,
            response_model_exclude_none=True,
        )
        async def create_record(payload: write_model, repository: RecordRepository = Depends(get_repository)):
            row = await repository.insert(entity, entity.to_row(payload))
            return entity.from_row(row)

    if entity.supports(Capability.UPDATE):

        @router.put(
            "/{record_id}",
            name=f"update_{entity.name}",
            response_model=read_model,
            response_model_exclude_none=True,
        )
        async def update_record(
            record_id: int,
            payload: write_model,
            repository: RecordRepository = Depends(get_repository),
        ):
            # Unknown ids are a no-op that still reports success.
            await repository.update(entity, record_id, entity.to_row(payload))
            return entity.echo(record_id, payload)

    if entity.supports(Capability.DELETE):

        @router.delete(
            "/{record_id}",
            name=f"delete_{entity.name}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
        )
        async def delete_record(record_id: int, repository: RecordRepository = Depends(get_repository)):
            await repository.delete(entity, record_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
