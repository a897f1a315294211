from fastapi import APIRouter, HTTPException, Query, Request, status
from typing import List, Optional
from dependencies import resource_service
from services.resources import Resource
from store import RecordNotFound, StoreError
from logging_config import get_logger

logger = get_logger(__name__)

REST_PREFIX = "/rest-api/v1"


def build_crud_router(resource: Resource) -> APIRouter:
    """List/get/create/replace/update/delete routes for one mock collection."""
    router = APIRouter(prefix=f"{REST_PREFIX}/{resource.name}", tags=[resource.name])
    label = resource.singular.capitalize()
    Model = resource.model
    CreateModel = resource.create_model
    UpdateModel = resource.update_model

    def not_found(record_id: int) -> HTTPException:
        logger.warning(f"{label} {record_id} not found")
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")

    def store_failure(action: str, e: StoreError) -> HTTPException:
        logger.error(f"Failed to {action} {resource.name}: {e}", exc_info=True)
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action} {resource.singular}")

    @router.get("/", response_model=List[Model])
    async def list_records(
        request: Request,
        skip: int = Query(0, ge=0, description="Number of records to skip"),
        limit: Optional[int] = Query(None, ge=1, description="Maximum number of records to return"),
    ):
        try:
            records = resource_service(request, resource).list(skip=skip, limit=limit)
        except StoreError as e:
            raise store_failure("list", e)
        logger.debug(f"Listed {len(records)} {resource.name} (skip={skip}, limit={limit})")
        return records

    @router.get("/{record_id}", response_model=Model)
    async def get_record(record_id: int, request: Request):
        try:
            return resource_service(request, resource).get(record_id)
        except RecordNotFound:
            raise not_found(record_id)
        except StoreError as e:
            raise store_failure("read", e)

    @router.post("/", response_model=Model, status_code=status.HTTP_201_CREATED)
    async def create_record(payload: CreateModel, request: Request):
        try:
            return resource_service(request, resource).create(payload)
        except StoreError as e:
            raise store_failure("create", e)

    @router.put("/{record_id}", response_model=Model)
    async def replace_record(record_id: int, payload: CreateModel, request: Request):
        try:
            return resource_service(request, resource).replace(record_id, payload)
        except RecordNotFound:
            raise not_found(record_id)
        except StoreError as e:
            raise store_failure("replace", e)

    @router.patch("/{record_id}", response_model=Model)
    async def update_record(record_id: int, payload: UpdateModel, request: Request):
        try:
            return resource_service(request, resource).update(record_id, payload.model_dump(exclude_unset=True, exclude_none=True))
        except RecordNotFound:
            raise not_found(record_id)
        except StoreError as e:
            raise store_failure("update", e)

    @router.delete("/{record_id}", response_model=Model)
    async def delete_record(record_id: int, request: Request):
        try:
            return resource_service(request, resource).delete(record_id)
        except RecordNotFound:
            raise not_found(record_id)
        except StoreError as e:
            raise store_failure("delete", e)

    return router
