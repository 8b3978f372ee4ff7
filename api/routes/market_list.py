"""API routes for the grocery market list."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_ingredient_repository
from domain.schemas.market_schemas import MarketListItemResponse, MarketListResponse
from repositories import IngredientRepository
from services.market_list_service import MarketListService

router = APIRouter(prefix="/market-list", tags=["Market List"])
logger = logging.getLogger("cookcourse.api.market_list")


@router.get("", response_model=MarketListResponse)
def get_market_list(repository: IngredientRepository = Depends(get_ingredient_repository)):
    """
    Market list built from the stocked ingredients.

    Ingredients with the same name (case and surrounding spaces ignored) are
    merged: quantities are summed and the price is quantity times unit price.
    """
    items = MarketListService.build_list(repository)
    total = sum((item.price for item in items), start=0)
    return MarketListResponse(
        items=[MarketListItemResponse.model_validate(item) for item in items],
        total_price=float(total),
    )
