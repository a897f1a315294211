import strawberry
from typing import Optional
from strawberry.types import Info

from graphql_api.crud import app_state
from schemas.auth import SignupRequest


@strawberry.type
class Account:
    id: int
    username: str
    email: str
    created_at: str


@strawberry.type
class AuthPayload:
    token: str
    user: Account


def _payload(data: dict) -> AuthPayload:
    return AuthPayload(token=data["token"], user=Account(**data["user"]))


@strawberry.type
class Query:
    @strawberry.field
    def me(self, info: Info, token: str) -> Account:
        return Account(**app_state(info).auth_service.me(token))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def signup(self, info: Info, username: str, email: str, password: str) -> AuthPayload:
        body = SignupRequest(username=username, email=email, password=password)
        return _payload(app_state(info).auth_service.signup(body.username, body.email, body.password))

    @strawberry.mutation
    def login(self, info: Info, username: str, password: str) -> AuthPayload:
        return _payload(app_state(info).auth_service.login(username, password))

    @strawberry.mutation
    def logout(self, info: Info, token: Optional[str] = None) -> bool:
        return app_state(info).auth_service.logout(token)


auth_schema = strawberry.Schema(query=Query, mutation=Mutation)
