import strawberry
from typing import List, Optional
from strawberry.types import Info

from graphql_api.crud import create_record, delete_record, get_record, list_records, to_type, update_record
from services.resources import JOBS


@strawberry.type
class Job:
    id: int
    title: str
    company: str
    location: str
    job_type: str
    remote: bool
    salary: Optional[int] = None
    posted_at: Optional[str] = None


@strawberry.input
class JobInput:
    title: str
    company: str
    location: str
    job_type: str = "full-time"
    remote: bool = False
    salary: Optional[int] = None
    posted_at: Optional[str] = None


@strawberry.input
class JobUpdateInput:
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    remote: Optional[bool] = None
    salary: Optional[int] = None
    posted_at: Optional[str] = None


@strawberry.type
class Query:
    @strawberry.field
    def jobs(self, info: Info, skip: int = 0, limit: Optional[int] = None) -> List[Job]:
        return [to_type(Job, m) for m in list_records(info, JOBS, skip, limit)]

    @strawberry.field
    def job(self, info: Info, id: int) -> Optional[Job]:
        return to_type(Job, get_record(info, JOBS, id))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_job(self, info: Info, input: JobInput) -> Job:
        return to_type(Job, create_record(info, JOBS, input))

    @strawberry.mutation
    def update_job(self, info: Info, id: int, input: JobUpdateInput) -> Optional[Job]:
        return to_type(Job, update_record(info, JOBS, id, input))

    @strawberry.mutation
    def delete_job(self, info: Info, id: int) -> Optional[Job]:
        return to_type(Job, delete_record(info, JOBS, id))


jobs_schema = strawberry.Schema(query=Query, mutation=Mutation)
