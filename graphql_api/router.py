from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from graphql_api.auth import auth_schema
from graphql_api.currency import currency_schema
from graphql_api.jobs import jobs_schema
from graphql_api.movies import movies_schema
from graphql_api.products import products_schema
from graphql_api.users import users_schema
from graphql_api.weather import weather_schema
from logging_config import get_logger

logger = get_logger(__name__)

GRAPHQL_PREFIX = "/graphql/v1"

GRAPHQL_SCHEMAS = {
    "users": users_schema,
    "movies": movies_schema,
    "jobs": jobs_schema,
    "products": products_schema,
    "currency": currency_schema,
    "auth": auth_schema,
    "weather": weather_schema,
}


def mount_graphql(app: FastAPI) -> None:
    for name, schema in GRAPHQL_SCHEMAS.items():
        app.include_router(GraphQLRouter(schema, graphql_ide="graphiql"), prefix=f"{GRAPHQL_PREFIX}/{name}", tags=["graphql"])
        logger.debug(f"Mounted GraphQL schema {name} at {GRAPHQL_PREFIX}/{name}")
