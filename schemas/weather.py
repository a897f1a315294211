from pydantic import BaseModel
from typing import List, Optional


class WeatherReport(BaseModel):
    city: str
    country: Optional[str] = None
    temperature: float
    feels_like: Optional[float] = None
    humidity: Optional[int] = None
    description: str
    wind_speed: Optional[float] = None

class CitiesResponse(BaseModel):
    cities: List[str]
