"""Generic CRUD over a mock collection, shared by the REST and GraphQL layers."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from schemas.jobs import Job, JobCreate, JobUpdate
from schemas.movies import Movie, MovieCreate, MovieUpdate
from schemas.notes import Note, NoteCreate, NoteUpdate
from schemas.products import Product, ProductCreate, ProductUpdate
from schemas.users import User, UserCreate, UserUpdate
from store import MockCollection


@dataclass(frozen=True)
class Resource:
    name: str
    singular: str
    model: Type[BaseModel]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    # adds server-owned fields to a new record
    on_create: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    # server-owned fields, kept across PUT and never taken from clients
    server_fields: Tuple[str, ...] = ()


class ResourceService:
    def __init__(self, resource: Resource, collection: MockCollection):
        self.resource = resource
        self.collection = collection

    def _model(self, record: Dict[str, Any]) -> BaseModel:
        return self.resource.model.model_validate(record)

    def _client_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in fields.items() if k not in self.resource.server_fields and k != "id"}

    def list(self, skip: int = 0, limit: Optional[int] = None) -> List[BaseModel]:
        return [self._model(r) for r in self.collection.list(skip=skip, limit=limit)]

    def get(self, record_id: int) -> BaseModel:
        return self._model(self.collection.get(record_id))

    def create(self, payload: BaseModel) -> BaseModel:
        fields = self._client_fields(payload.model_dump())
        if self.resource.on_create:
            fields = self.resource.on_create(fields)
        return self._model(self.collection.create(fields))

    def replace(self, record_id: int, payload: BaseModel) -> BaseModel:
        existing = self.collection.get(record_id)
        kept = {k: existing[k] for k in self.resource.server_fields if k in existing}
        fields = {**self._client_fields(payload.model_dump()), **kept}
        return self._model(self.collection.replace(record_id, fields))

    def update(self, record_id: int, fields: Dict[str, Any]) -> BaseModel:
        return self._model(self.collection.update(record_id, self._client_fields(fields)))

    def delete(self, record_id: int) -> BaseModel:
        return self._model(self.collection.delete(record_id))


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _stamp_created_at(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {**fields, "created_at": utc_now_iso()}


USERS = Resource("users", "user", User, UserCreate, UserUpdate)
MOVIES = Resource("movies", "movie", Movie, MovieCreate, MovieUpdate)
JOBS = Resource("jobs", "job", Job, JobCreate, JobUpdate)
PRODUCTS = Resource("products", "product", Product, ProductCreate, ProductUpdate)
NOTES = Resource("notes", "note", Note, NoteCreate, NoteUpdate, on_create=_stamp_created_at, server_fields=("created_at",))
