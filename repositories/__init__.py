"""
Repositories package - Data access layer.
"""

from repositories.base import MongoRepository
from repositories.meal_repository import MealRepository
from repositories.profile_repository import ProfileRepository
from repositories.ingredient_repository import IngredientRepository

__all__ = [
    "MongoRepository",
    "MealRepository",
    "ProfileRepository",
    "IngredientRepository",
]
