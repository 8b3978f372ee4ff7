"""Market list service"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List

from domain.models import MarketListItem
from repositories.ingredient_repository import IngredientRepository

logger = logging.getLogger("cookcourse.market_list")

DEFAULT_UNIT = "unité"


def _to_decimal(value: Any, default: Decimal) -> Decimal:
    if value is None or value == "":
        return default
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return default


class MarketListService:
    """Business logic for the grocery market list."""

    @staticmethod
    def aggregate(ingredients: Iterable[Dict[str, Any]]) -> List[MarketListItem]:
        """
        Merge ingredient documents into market list lines.

        Algorithm:
        1. Skip documents without a name
        2. Group by lower-cased, trimmed name; the first spelling is kept
        3. Sum quantities (missing or zero quantity counts as 1)
        4. Sum price * quantity (missing price counts as 0)

        Lines come out in first-seen order. The unit of the first document wins.
        """
        merged: Dict[str, MarketListItem] = {}

        for ingredient in ingredients:
            name = ingredient.get("name")
            if not name or not isinstance(name, str) or not name.strip():
                continue

            key = name.lower().strip()
            quantity = _to_decimal(ingredient.get("quantity"), Decimal(1)) or Decimal(1)
            price = _to_decimal(ingredient.get("price"), Decimal(0))

            if key not in merged:
                merged[key] = MarketListItem(
                    name=name,
                    quantity=Decimal(0),
                    unit=ingredient.get("unit") or DEFAULT_UNIT,
                    price=Decimal(0),
                )

            line = merged[key]
            line.quantity += quantity
            line.price += price * quantity

        logger.info("Market list built: %d line(s)", len(merged))
        return list(merged.values())

    @staticmethod
    def build_list(repository: IngredientRepository) -> List[MarketListItem]:
        return MarketListService.aggregate(repository.list_all())
