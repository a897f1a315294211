import strawberry
from typing import List, Optional
from strawberry.types import Info

from graphql_api.crud import create_record, delete_record, get_record, list_records, to_type, update_record
from services.resources import MOVIES


@strawberry.type
class Movie:
    id: int
    title: str
    year: int
    genre: str
    director: str
    rating: Optional[float] = None
    runtime: Optional[int] = None


@strawberry.input
class MovieInput:
    title: str
    year: int
    genre: str
    director: str
    rating: Optional[float] = None
    runtime: Optional[int] = None


@strawberry.input
class MovieUpdateInput:
    title: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    rating: Optional[float] = None
    runtime: Optional[int] = None


@strawberry.type
class Query:
    @strawberry.field
    def movies(self, info: Info, skip: int = 0, limit: Optional[int] = None) -> List[Movie]:
        return [to_type(Movie, m) for m in list_records(info, MOVIES, skip, limit)]

    @strawberry.field
    def movie(self, info: Info, id: int) -> Optional[Movie]:
        return to_type(Movie, get_record(info, MOVIES, id))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_movie(self, info: Info, input: MovieInput) -> Movie:
        return to_type(Movie, create_record(info, MOVIES, input))

    @strawberry.mutation
    def update_movie(self, info: Info, id: int, input: MovieUpdateInput) -> Optional[Movie]:
        return to_type(Movie, update_record(info, MOVIES, id, input))

    @strawberry.mutation
    def delete_movie(self, info: Info, id: int) -> Optional[Movie]:
        return to_type(Movie, delete_record(info, MOVIES, id))


movies_schema = strawberry.Schema(query=Query, mutation=Mutation)
