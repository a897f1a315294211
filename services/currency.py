from typing import Any, Dict, Optional

import httpx

from logging_config import get_logger
from services.upstream import UpstreamError, fetch_json
from store import MockStore

logger = get_logger(__name__)


class UnknownCurrency(LookupError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported currency: {code}")


class CurrencyService:
    """Exchange rates from the mock rate table, or from CURRENCY_API_URL when set."""

    def __init__(self, store: MockStore, api_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.store = store
        self.api_url = api_url
        self.transport = transport

    async def get_rates(self, base: str = "USD") -> Dict[str, Any]:
        base = base.upper()
        if self.api_url:
            return await self._fetch_rates(base)

        table = self.store.read() or {}
        rates = table.get("rates", {})
        if base not in rates:
            raise UnknownCurrency(base)
        base_rate = rates[base]
        return {
            "base": base,
            "date": table.get("date"),
            "rates": {code: round(rate / base_rate, 6) for code, rate in rates.items()},
        }

    async def _fetch_rates(self, base: str) -> Dict[str, Any]:
        data = await fetch_json(self.api_url, params={"base": base}, transport=self.transport)
        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise UpstreamError("Upstream response has no rates")
        rates = {code.upper(): float(rate) for code, rate in rates.items()}
        rates.setdefault(base, 1.0)
        return {"base": base, "date": data.get("date"), "rates": rates}

    async def convert(self, from_currency: str, to_currency: str, amount: float = 1.0) -> Dict[str, Any]:
        table = await self.get_rates(from_currency)
        to_currency = to_currency.upper()
        if to_currency not in table["rates"]:
            raise UnknownCurrency(to_currency)
        rate = table["rates"][to_currency]
        logger.debug(f"Converting {amount} {table['base']} to {to_currency} at {rate}")
        return {
            "from": table["base"],
            "to": to_currency,
            "amount": amount,
            "rate": rate,
            "result": round(amount * rate, 6),
            "date": table["date"],
        }
