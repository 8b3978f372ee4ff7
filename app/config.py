"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="CookCourse", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # MongoDB settings
    mongo_uri: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URI"
    )
    mongo_db_name: str = Field(default="cookcourse", description="MongoDB database name")
    meals_collection: str = Field(
        default="plats_habituels", description="Collection holding the user's usual dishes"
    )
    users_collection: str = Field(default="users", description="Collection holding user profiles")
    ingredients_collection: str = Field(
        default="ingredients", description="Collection holding stocked ingredients"
    )
    meal_type_filter: str = Field(
        default="plat", description="Only catalog entries of this type are meal candidates"
    )

    # EmailJS settings
    emailjs_api_url: str = Field(
        default="https://api.emailjs.com/api/v1.0/email/send",
        description="EmailJS send endpoint",
    )
    emailjs_service_id: str = Field(default="", description="EmailJS service ID")
    emailjs_template_id: str = Field(default="", description="EmailJS template ID")
    emailjs_public_key: str = Field(default="", description="EmailJS public key (user_id)")
    emailjs_private_key: Optional[str] = Field(
        default=None, description="EmailJS private key (accessToken), required in strict mode"
    )
    email_timeout_sec: float = Field(
        default=10.0, gt=0, description="Timeout for a single send request"
    )

    # Calendar rendering and status messages
    default_sender_name: str = Field(
        default="CookCourse", description="Sender display name when the user has no name"
    )
    default_locale: str = Field(default="fr", description="Locale used to render calendars")
    status_display_sec: float = Field(
        default=3.0, ge=0, description="Display time of success and precondition messages"
    )
    status_failure_display_sec: float = Field(
        default=5.0, ge=0, description="Display time of partial and total failure messages"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="CookCourse API", description="API documentation title"
    )
    api_description: str = Field(
        default="Family meal calendars: generation, rendering and e-mail distribution",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
