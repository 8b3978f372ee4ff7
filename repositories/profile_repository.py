"""
Profile Repository - user documents with their family members (MongoDB)
"""

import logging
from typing import Optional

from pymongo.database import Database

from domain.schemas.profile_schemas import UserProfile
from repositories.base import MongoRepository

logger = logging.getLogger("cookcourse.repositories.profiles")


class ProfileRepository(MongoRepository):
    """Read access to user profiles; writes belong to the onboarding flow."""

    def __init__(self, db: Optional[Database], collection_name: str = "users"):
        super().__init__(db, collection_name)

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        doc = self.find_one({"_id": user_id})
        if doc is None:
            logger.info("No profile document for user %s", user_id)
            return None
        return UserProfile.model_validate(doc)
