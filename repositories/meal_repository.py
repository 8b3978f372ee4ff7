"""
Meal Repository - read-only access to the user's usual dishes (MongoDB)
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from domain.models import MealCandidate
from repositories.base import MongoRepository

logger = logging.getLogger("cookcourse.repositories.meals")


def to_candidate(doc: Dict[str, Any]) -> Optional[MealCandidate]:
    """Convert a catalog document to a MealCandidate; documents without a name are skipped."""
    name = (doc.get("name") or "").strip()
    if not name:
        return None
    meal_id = doc.get("_id") if doc.get("_id") is not None else doc.get("id")
    return MealCandidate(
        id=str(meal_id) if meal_id is not None else name,
        name=name,
        category=doc.get("category") or "",
        image_ref=doc.get("image") or doc.get("imageUrl"),
    )


class MealRepository(MongoRepository):
    """
    Meal pool provider.
    Filters the catalog to one user and one entry type (main dishes by default);
    the calendar engine never filters candidates itself.
    """

    def __init__(self, db: Optional[Database], collection_name: str = "plats_habituels", meal_type: str = "plat"):
        super().__init__(db, collection_name)
        self.meal_type = meal_type

    def list_candidates(self, user_id: str) -> List[MealCandidate]:
        docs = self.find({"userId": user_id, "type": self.meal_type})
        candidates = [c for c in (to_candidate(d) for d in docs) if c is not None]
        logger.info(
            "Loaded %d meal candidates of type %s for user %s",
            len(candidates),
            self.meal_type,
            user_id,
        )
        return candidates
