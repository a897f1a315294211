from fastapi import Request

from services.auth import AuthService
from services.currency import CurrencyService
from services.resources import Resource, ResourceService
from services.weather import WeatherService
from store import MockDatabase


def get_db(request: Request) -> MockDatabase:
    return request.app.state.db


def resource_service(request: Request, resource: Resource) -> ResourceService:
    return ResourceService(resource, get_db(request).collection(resource.name))


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_currency_service(request: Request) -> CurrencyService:
    return request.app.state.currency_service


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service
