"""Generic CRUD routes shared by every resource service.

``build_resource_router`` produces the five standard endpoints under
``/api/<plural>`` for one ``ResourceSchema``. Resource modules add any
extra endpoints to the router it returns.
"""
from typing import Optional

from fastapi import APIRouter, Body, Depends

from clinic_api.api.deps import get_resource_service
from clinic_api.models.resource import ResourceSchema
from clinic_api.services.resource_service import ResourceService


def build_resource_router(schema: ResourceSchema) -> APIRouter:
    router = APIRouter(prefix=schema.route_prefix, tags=[schema.plural])

    @router.get("")
    async def list_records(service: ResourceService = Depends(get_resource_service)):
        return service.list()

    @router.get("/{record_id}")
    async def get_record(record_id: str, service: ResourceService = Depends(get_resource_service)):
        return service.get(record_id)

    @router.post("", status_code=201)
    async def create_record(
        payload: Optional[dict] = Body(None),
        service: ResourceService = Depends(get_resource_service),
    ):
        return service.create(payload or {})

    @router.put("/{record_id}")
    async def update_record(
        record_id: str,
        payload: Optional[dict] = Body(None),
        service: ResourceService = Depends(get_resource_service),
    ):
        return service.update(record_id, payload or {})

    @router.delete("/{record_id}")
    async def delete_record(record_id: str, service: ResourceService = Depends(get_resource_service)):
        return service.delete(record_id)

    return router
