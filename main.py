"""
CookCourse FastAPI Application
Main entry point: meal calendar generation, rendering and e-mail distribution
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import calendars, health, market_list

from adapters import mongo_adapter
from adapters.email_adapter import create_client

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    rendering_exception_handler,
    general_exception_handler,
)
from app.exceptions import CalendarRenderingError, ServiceValidationError, NotFoundError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("cookcourse.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Opens the MongoDB connection (best-effort) and the shared HTTP client
    used for e-mail delivery.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    mongo_adapter.connect(settings.mongo_uri, settings.mongo_db_name)

    app.state.http_client = create_client(timeout=settings.email_timeout_sec)
    if not (settings.emailjs_service_id and settings.emailjs_template_id and settings.emailjs_public_key):
        _logger.warning("EmailJS is not configured; calendar e-mails will fail until it is")

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        try:
            await app.state.http_client.aclose()
            _logger.info("HTTP client closed")
        except Exception as e:
            _logger.exception("Error closing HTTP client during shutdown: %s", e)

        mongo_adapter.close()


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
app.add_exception_handler(NotFoundError, not_found_exception_handler)
app.add_exception_handler(CalendarRenderingError, rendering_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(calendars.router, prefix=settings.api_prefix)
app.include_router(market_list.router, prefix=settings.api_prefix)
app.include_router(health.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
