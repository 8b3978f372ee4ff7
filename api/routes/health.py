"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from adapters import mongo_adapter
from api.dependencies import get_settings
from app.config import Settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("cookcourse.api.health")


@router.get("/health-check")
def health_check(settings: Settings = Depends(get_settings)):
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "mongo_connected": mongo_adapter.is_connected(),
    }
