from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import socketio

from constants import (
    CLEANUP_HOUR,
    CLEANUP_MINUTE,
    CORS_ORIGINS,
    CURRENCY_API_URL,
    DATA_DIR,
    DOCS_DIR,
    LOG_FILE,
    LOG_LEVEL,
    RELAY_BACKEND,
    SCHEDULER_ENABLED,
    WEATHER_API_KEY,
    WEATHER_API_URL,
)
from graphql_api.router import mount_graphql
from logging_config import get_logger, setup_logging
from relay import create_socket_server
from routers.auth import auth_router
from routers.crud import build_crud_router
from routers.currency import currency_router
from routers.images import images_router
from routers.relay import relay_router
from routers.weather import weather_router
from scheduler import DailyJob
from services.auth import AuthService
from services.currency import CurrencyService
from services.notes import purge_expired_notes
from services.resources import JOBS, MOVIES, NOTES, PRODUCTS, USERS
from services.weather import WeatherService
from store import MockDatabase

# Setup logging
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    cleanup_job = None
    if app.state.scheduler_enabled:
        # Cron job every night at midnight
        cleanup_job = DailyJob(
            "purge-expired-notes",
            lambda: purge_expired_notes(app.state.db.collection(NOTES.name)),
            hour=CLEANUP_HOUR,
            minute=CLEANUP_MINUTE,
        )
        cleanup_job.start()
    logger.info("Application startup complete")
    try:
        yield
    finally:
        if cleanup_job is not None:
            await cleanup_job.stop()
        logger.info("Application shutdown complete")


def not_found_response(scope) -> RedirectResponse:
    logger.info(f"No route for {scope.get('method')} {scope.get('path')}, redirecting to /")
    return RedirectResponse(url="/", status_code=404)


async def redirect_home(scope, receive, send):
    """Unmatched routes answer 404 and point the client back to the docs page."""
    if scope["type"] == "websocket":
        await send({"type": "websocket.close", "code": 1000})
        return
    await not_found_response(scope)(scope, receive, send)


class StaticFilesWithFallback(StaticFiles):
    """Static files whose misses fall through to the docs redirect."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code != 404:
                raise
            return not_found_response(scope)


def create_app(
    data_dir: Optional[str] = None,
    docs_dir: Optional[str] = None,
    scheduler_enabled: bool = SCHEDULER_ENABLED,
    relay_backend: str = RELAY_BACKEND,
) -> FastAPI:
    data_dir = Path(data_dir or DATA_DIR)
    docs_dir = Path(docs_dir or DOCS_DIR)

    app = FastAPI(title="Playground API", version="v1", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    db = MockDatabase(data_dir)
    app.state.db = db
    app.state.scheduler_enabled = scheduler_enabled
    app.state.sio = create_socket_server(backend=relay_backend)
    app.state.auth_service = AuthService(db.collection("auth"))
    app.state.currency_service = CurrencyService(db.document("currency"), api_url=CURRENCY_API_URL)
    app.state.weather_service = WeatherService(db.collection("weather"), api_url=WEATHER_API_URL, api_key=WEATHER_API_KEY)

    # serve static files
    app.mount("/static", StaticFilesWithFallback(directory=docs_dir / "public"), name="static")
    app.mount("/images/products", StaticFilesWithFallback(directory=data_dir / "products"), name="product-images")

    # Documentation file route
    index_file = docs_dir / "index.html"

    @app.get("/", include_in_schema=False)
    async def documentation():
        return FileResponse(index_file)

    # REST API routes
    for resource in (USERS, MOVIES, JOBS, PRODUCTS, NOTES):
        app.include_router(build_crud_router(resource))
    app.include_router(images_router)
    app.include_router(currency_router)
    app.include_router(auth_router)
    app.include_router(weather_router)
    app.include_router(relay_router)

    mount_graphql(app)

    # Redirect to home page if route is not found
    app.router.default = redirect_home

    logger.info(f"FastAPI application initialized (data_dir={data_dir})")
    return app


def create_asgi_app(app: Optional[FastAPI] = None) -> socketio.ASGIApp:
    """Wrap the HTTP app with the Socket.IO file-sharing relay."""
    app = app or create_app()
    return socketio.ASGIApp(app.state.sio, other_asgi_app=app)


app = create_app()
asgi_app = create_asgi_app(app)
