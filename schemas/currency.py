from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class ExchangeRateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    amount: float
    rate: float
    result: float
    date: Optional[str] = None

class RatesResponse(BaseModel):
    base: str
    date: Optional[str] = None
    rates: Dict[str, float]
