from typing import Any, Dict, List, Optional

import httpx

from logging_config import get_logger
from services.upstream import UpstreamError, UpstreamNotFound, fetch_json
from store import MockCollection

logger = get_logger(__name__)


class CityNotFound(LookupError):
    def __init__(self, city: str):
        self.city = city
        super().__init__(f"No weather data for {city}")


class WeatherService:
    """Current weather per city, from mock reports or an OpenWeather-compatible API."""

    def __init__(
        self,
        store: MockCollection,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.store = store
        self.api_url = api_url
        self.api_key = api_key
        self.transport = transport

    def cities(self) -> List[str]:
        return [report["city"] for report in self.store.all()]

    async def report(self, city: str) -> Dict[str, Any]:
        city = city.strip()
        if self.api_url:
            return await self._fetch_report(city)
        wanted = city.lower()
        report = self.store.find(lambda r: str(r.get("city", "")).lower() == wanted)
        if report is None:
            raise CityNotFound(city)
        return report

    async def _fetch_report(self, city: str) -> Dict[str, Any]:
        params = {"q": city, "units": "metric"}
        if self.api_key:
            params["appid"] = self.api_key
        try:
            data = await fetch_json(self.api_url, params=params, transport=self.transport)
        except UpstreamNotFound as e:
            raise CityNotFound(city) from e
        try:
            main = data["main"]
            return {
                "city": data.get("name", city),
                "country": data.get("sys", {}).get("country"),
                "temperature": main["temp"],
                "feels_like": main.get("feels_like"),
                "humidity": main.get("humidity"),
                "description": (data.get("weather") or [{}])[0].get("description", ""),
                "wind_speed": data.get("wind", {}).get("speed"),
            }
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected weather payload for {city}: {e}")
            raise UpstreamError("Unexpected weather payload") from e
