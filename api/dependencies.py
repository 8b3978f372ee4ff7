"""
API dependencies for dependency injection

Every collaborator of the calendar routes (document store, random source,
clock, e-mail sender) is provided here, so tests can swap any of them through
``app.dependency_overrides``.
"""

import random
from datetime import date
from typing import Callable, Optional

import httpx
from fastapi import Depends, Request
from pymongo.database import Database

from adapters import mongo_adapter
from adapters.email_adapter import EmailJSSender, EmailSender
from app.config import Settings, settings as app_settings
from repositories import IngredientRepository, MealRepository, ProfileRepository
from services.assignment_service import MealAssignmentEngine
from services.dispatch_service import DispatchService


def get_settings() -> Settings:
    return app_settings


def get_mongo_db() -> Optional[Database]:
    return mongo_adapter.get_db()


def get_meal_repository(
    db: Optional[Database] = Depends(get_mongo_db),
    settings: Settings = Depends(get_settings),
) -> MealRepository:
    return MealRepository(db, settings.meals_collection, settings.meal_type_filter)


def get_profile_repository(
    db: Optional[Database] = Depends(get_mongo_db),
    settings: Settings = Depends(get_settings),
) -> ProfileRepository:
    return ProfileRepository(db, settings.users_collection)


def get_ingredient_repository(
    db: Optional[Database] = Depends(get_mongo_db),
    settings: Settings = Depends(get_settings),
) -> IngredientRepository:
    return IngredientRepository(db, settings.ingredients_collection)


def get_rng() -> random.Random:
    """A fresh unseeded random source per request."""
    return random.Random()


def get_clock() -> Callable[[], date]:
    return date.today


def get_assignment_engine(rng: random.Random = Depends(get_rng)) -> MealAssignmentEngine:
    return MealAssignmentEngine(rng)


def get_email_sender(request: Request, settings: Settings = Depends(get_settings)) -> EmailSender:
    """EmailJS sender bound to the application's shared HTTP client.

    The client is opened and closed by the application lifespan only.
    """
    client: Optional[httpx.AsyncClient] = getattr(request.app.state, "http_client", None)
    if client is None:
        raise RuntimeError("HTTP client is not initialized: the application lifespan has not run")
    return EmailJSSender(client, settings)


def get_dispatch_service(
    sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> DispatchService:
    return DispatchService(
        sender,
        team_name=settings.app_name,
        default_sender_name=settings.default_sender_name,
    )
