"""MongoDB adapter: connection lifecycle for the document store.
"""

from typing import Optional
import logging

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger("cookcourse.mongo")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ------------------ Connection ------------------
def connect(uri: str, db_name: str = "cookcourse"):
    global _client, _db
    try:
        _client = MongoClient(uri, serverSelectionTimeoutMS=5000)
        _db = _client[db_name]
        _client.admin.command("ping")
        logger.info("Connected to MongoDB %s (database: %s)", uri, db_name)
    except Exception as exc:
        _client = None
        _db = None
        logger.warning(
            "Could not initialize MongoDB client: %s; catalog reads will be empty", exc
        )


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


def get_db() -> Optional[Database]:
    """Current database handle, or None when not connected."""
    return _db


def is_connected() -> bool:
    return _db is not None
