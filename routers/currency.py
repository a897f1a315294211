from fastapi import APIRouter, HTTPException, Query, Request, status
from dependencies import get_currency_service
from routers.crud import REST_PREFIX
from schemas.currency import ExchangeRateResponse, RatesResponse
from services.currency import UnknownCurrency
from services.upstream import UpstreamError
from logging_config import get_logger

logger = get_logger(__name__)

currency_router = APIRouter(prefix=f"{REST_PREFIX}/currency", tags=["currency"])


def _currency_error(e: Exception) -> HTTPException:
    if isinstance(e, UnknownCurrency):
        logger.warning(f"Currency lookup failed: {e}")
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    logger.error(f"Currency upstream failed: {e}")
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Exchange rate provider unavailable")


@currency_router.get("/", response_model=ExchangeRateResponse)
async def exchange_rate(
    request: Request,
    from_currency: str = Query("USD", alias="from", min_length=3, max_length=3),
    to_currency: str = Query(..., alias="to", min_length=3, max_length=3),
    amount: float = Query(1.0, ge=0),
):
    """Convert ``amount`` from one currency to another."""
    try:
        return await get_currency_service(request).convert(from_currency, to_currency, amount)
    except (UnknownCurrency, UpstreamError) as e:
        raise _currency_error(e)


@currency_router.get("/rates", response_model=RatesResponse)
async def exchange_rates(request: Request, base: str = Query("USD", min_length=3, max_length=3)):
    try:
        return await get_currency_service(request).get_rates(base)
    except (UnknownCurrency, UpstreamError) as e:
        raise _currency_error(e)
