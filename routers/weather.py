from fastapi import APIRouter, HTTPException, Query, Request, status
from dependencies import get_weather_service
from routers.crud import REST_PREFIX
from schemas.weather import CitiesResponse, WeatherReport
from services.upstream import UpstreamError
from services.weather import CityNotFound
from logging_config import get_logger

logger = get_logger(__name__)

weather_router = APIRouter(prefix=f"{REST_PREFIX}/weather", tags=["weather"])


@weather_router.get("/", response_model=WeatherReport)
async def current_weather(request: Request, city: str = Query(..., min_length=1)):
    try:
        return await get_weather_service(request).report(city)
    except CityNotFound as e:
        logger.warning(f"Weather lookup failed: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamError as e:
        logger.error(f"Weather upstream failed for {city}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Weather provider unavailable")


@weather_router.get("/cities", response_model=CitiesResponse)
async def known_cities(request: Request):
    return CitiesResponse(cities=get_weather_service(request).cities())
