import strawberry
from typing import Annotated, List, Optional
from strawberry.types import Info

from graphql_api.crud import app_state


@strawberry.type
class ExchangeRate:
    from_currency: str = strawberry.field(name="from")
    to_currency: str = strawberry.field(name="to")
    amount: float
    rate: float
    result: float
    date: Optional[str] = None


@strawberry.type
class Rate:
    code: str
    rate: float


@strawberry.type
class Rates:
    base: str
    date: Optional[str]
    rates: List[Rate]


@strawberry.type
class Query:
    @strawberry.field
    async def exchange_rate(
        self,
        info: Info,
        to: str,
        from_: Annotated[str, strawberry.argument(name="from")] = "USD",
        amount: float = 1.0,
    ) -> ExchangeRate:
        data = await app_state(info).currency_service.convert(from_, to, amount)
        return ExchangeRate(
            from_currency=data["from"],
            to_currency=data["to"],
            amount=data["amount"],
            rate=data["rate"],
            result=data["result"],
            date=data["date"],
        )

    @strawberry.field
    async def rates(self, info: Info, base: str = "USD") -> Rates:
        data = await app_state(info).currency_service.get_rates(base)
        return Rates(
            base=data["base"],
            date=data["date"],
            rates=[Rate(code=code, rate=rate) for code, rate in sorted(data["rates"].items())],
        )


currency_schema = strawberry.Schema(query=Query)
