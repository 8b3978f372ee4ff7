"""
Ingredient Repository - stocked ingredient documents used by the market list
"""

from typing import Any, Dict, List, Optional

from pymongo.database import Database

from repositories.base import MongoRepository


class IngredientRepository(MongoRepository):
    def __init__(self, db: Optional[Database], collection_name: str = "ingredients"):
        super().__init__(db, collection_name)

    def list_all(self) -> List[Dict[str, Any]]:
        return self.find()
