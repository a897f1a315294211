import strawberry
from typing import List, Optional
from strawberry.types import Info

from graphql_api.crud import create_record, delete_record, get_record, list_records, to_type, update_record
from services.resources import USERS


@strawberry.type
class User:
    id: int
    first_name: str
    last_name: str
    email: str
    gender: Optional[str] = None
    age: Optional[int] = None
    phone: Optional[str] = None
    city: Optional[str] = None


@strawberry.input
class UserInput:
    first_name: str
    last_name: str
    email: str
    gender: Optional[str] = None
    age: Optional[int] = None
    phone: Optional[str] = None
    city: Optional[str] = None


@strawberry.input
class UserUpdateInput:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    phone: Optional[str] = None
    city: Optional[str] = None


@strawberry.type
class Query:
    @strawberry.field
    def users(self, info: Info, skip: int = 0, limit: Optional[int] = None) -> List[User]:
        return [to_type(User, m) for m in list_records(info, USERS, skip, limit)]

    @strawberry.field
    def user(self, info: Info, id: int) -> Optional[User]:
        return to_type(User, get_record(info, USERS, id))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_user(self, info: Info, input: UserInput) -> User:
        return to_type(User, create_record(info, USERS, input))

    @strawberry.mutation
    def update_user(self, info: Info, id: int, input: UserUpdateInput) -> Optional[User]:
        return to_type(User, update_record(info, USERS, id, input))

    @strawberry.mutation
    def delete_user(self, info: Info, id: int) -> Optional[User]:
        return to_type(User, delete_record(info, USERS, id))


users_schema = strawberry.Schema(query=Query, mutation=Mutation)
