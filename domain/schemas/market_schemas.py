from typing import List

from pydantic import BaseModel


class MarketListItemResponse(BaseModel):
    name: str
    quantity: float
    unit: str
    price: float

    model_config = {"from_attributes": True}


class MarketListResponse(BaseModel):
    items: List[MarketListItemResponse]
    total_price: float
