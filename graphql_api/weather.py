import strawberry
from typing import List, Optional
from strawberry.types import Info

from graphql_api.crud import app_state


@strawberry.type
class Weather:
    city: str
    temperature: float
    description: str
    country: Optional[str] = None
    feels_like: Optional[float] = None
    humidity: Optional[int] = None
    wind_speed: Optional[float] = None


@strawberry.type
class Query:
    @strawberry.field
    async def weather(self, info: Info, city: str) -> Weather:
        report = await app_state(info).weather_service.report(city)
        return Weather(**{k: report.get(k) for k in (
            "city", "temperature", "description", "country", "feels_like", "humidity", "wind_speed"
        )})

    @strawberry.field
    def cities(self, info: Info) -> List[str]:
        return app_state(info).weather_service.cities()


weather_schema = strawberry.Schema(query=Query)
