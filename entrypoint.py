import uvicorn
from constants import HOST, PORT, LOG_LEVEL, LOG_FILE
from logging_config import setup_logging

# Setup logging before importing app
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)

from logging_config import get_logger

logger = get_logger(__name__)


def main() -> None:
    logger.info(f"Starting Playground API server on {HOST}:{PORT}")
    uvicorn.run("app:asgi_app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
