"""Resolver helpers shared by the per-resource GraphQL schemas."""

from dataclasses import asdict
from typing import Any, List, Optional

from pydantic import BaseModel
from strawberry.types import Info

from services.resources import Resource, ResourceService
from store import RecordNotFound


def app_state(info: Info) -> Any:
    return info.context["request"].app.state


def service(info: Info, resource: Resource) -> ResourceService:
    return ResourceService(resource, app_state(info).db.collection(resource.name))


def input_fields(data: Any, drop_none: bool = False) -> dict:
    fields = asdict(data)
    if drop_none:
        fields = {k: v for k, v in fields.items() if v is not None}
    return fields


def list_records(info: Info, resource: Resource, skip: int, limit: Optional[int]) -> List[BaseModel]:
    if skip < 0 or (limit is not None and limit < 1):
        raise ValueError("skip must be >= 0 and limit >= 1")
    return service(info, resource).list(skip=skip, limit=limit)


def get_record(info: Info, resource: Resource, record_id: int) -> Optional[BaseModel]:
    try:
        return service(info, resource).get(record_id)
    except RecordNotFound:
        return None


def create_record(info: Info, resource: Resource, data: Any) -> BaseModel:
    payload = resource.create_model(**input_fields(data))
    return service(info, resource).create(payload)


def update_record(info: Info, resource: Resource, record_id: int, data: Any) -> Optional[BaseModel]:
    # validate the partial input the same way PATCH does
    fields = resource.update_model(**input_fields(data, drop_none=True)).model_dump(exclude_unset=True)
    try:
        return service(info, resource).update(record_id, fields)
    except RecordNotFound:
        return None


def delete_record(info: Info, resource: Resource, record_id: int) -> Optional[BaseModel]:
    try:
        return service(info, resource).delete(record_id)
    except RecordNotFound:
        return None


def to_type(type_cls, model: Optional[BaseModel]):
    return None if model is None else type_cls(**model.model_dump())
