"""
Base repository for the document store.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger("cookcourse.repositories")


class MongoRepository:
    """
    Read access to one MongoDB collection.

    The database handle is injected. When it is None (store unreachable at
    startup) reads return empty results and log a warning instead of failing.
    """

    def __init__(self, db: Optional[Database], collection_name: str):
        self.db = db
        self.collection_name = collection_name

    @property
    def collection(self) -> Optional[Collection]:
        if self.db is None:
            return None
        return self.db[self.collection_name]

    def find(self, filter_query: Optional[Dict[str, Any]] = None, limit: int = 0) -> List[Dict[str, Any]]:
        """Documents matching ``filter_query`` (all when omitted)."""
        col = self.collection
        if col is None:
            logger.warning("MongoDB not available, returning no documents from %s", self.collection_name)
            return []
        cursor = col.find(filter_query or {})
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def find_one(self, filter_query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        col = self.collection
        if col is None:
            logger.warning("MongoDB not available, cannot read from %s", self.collection_name)
            return None
        return col.find_one(filter_query)
