import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", None)

DATA_DIR = os.getenv("DATA_DIR", str(BASE_DIR / "mock_data"))
DOCS_DIR = os.getenv("DOCS_DIR", str(BASE_DIR / "doc"))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# "memory" keeps relay rooms in-process, "redis" shares them between instances
RELAY_BACKEND = os.getenv("RELAY_BACKEND", "memory")

REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = os.getenv("REDIS_PORT", 6379)
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD", None)

REDIS_URL = f"redis://:{REDIS_PASSWORD}@{REDIS_HOST}:{REDIS_PORT}" if REDIS_PASSWORD else f"redis://{REDIS_HOST}:{REDIS_PORT}"

CURRENCY_API_URL = os.getenv("CURRENCY_API_URL", None)
WEATHER_API_URL = os.getenv("WEATHER_API_URL", None)
WEATHER_API_KEY = os.getenv("WEATHER_API_KEY", None)
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", 5))

NOTE_TTL_HOURS = int(os.getenv("NOTE_TTL_HOURS", 24))
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", 24))
CLEANUP_HOUR = int(os.getenv("CLEANUP_HOUR", 0))
CLEANUP_MINUTE = int(os.getenv("CLEANUP_MINUTE", 0))
SCHEDULER_ENABLED = os.getenv("SCHEDULER_ENABLED", "true").lower() in ("1", "true", "yes")
