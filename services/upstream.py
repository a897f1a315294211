from typing import Any, Dict, Optional

import httpx

from constants import UPSTREAM_TIMEOUT
from logging_config import get_logger

logger = get_logger(__name__)


class UpstreamError(RuntimeError):
    """A proxied third-party API failed or answered with garbage."""


class UpstreamNotFound(UpstreamError):
    pass


async def fetch_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: float = UPSTREAM_TIMEOUT,
) -> Any:
    logger.debug(f"Upstream GET {url} params={params}")
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, params=params)
    except httpx.HTTPError as e:
        logger.error(f"Upstream request to {url} failed: {e}")
        raise UpstreamError(f"Upstream request failed: {e}") from e

    if response.status_code == 404:
        raise UpstreamNotFound(f"Upstream returned 404 for {url}")
    if response.is_error:
        logger.error(f"Upstream {url} answered {response.status_code}")
        raise UpstreamError(f"Upstream answered {response.status_code}")
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Upstream {url} returned invalid JSON: {e}")
        raise UpstreamError("Upstream returned invalid JSON") from e
