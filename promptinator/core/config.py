from __future__ import annotations

from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[2]

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Promptinator API", alias="APP_NAME")
    description: str = "Structured text-to-image prompt builder"
    version: str = "1.0.0"

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT", ge=1, le=65535)
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    allowed_origins: Annotated[List[str], NoDecode] = Field(default_factory=list, alias="ALLOWED_ORIGINS")

    # Upstream auth layer forwards the authenticated user id in this header
    auth_user_header: str = Field(default="X-User-Id", alias="AUTH_USER_HEADER")

    # Provider credentials
    openai_api_key: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    google_api_key: Optional[str] = Field(default=None, alias="GOOGLE_API_KEY")

    openai_base_url: str = Field(default="https://api.openai.com/v1", alias="OPENAI_BASE_URL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta", alias="GEMINI_BASE_URL"
    )
    openai_image_model: str = Field(default="gpt-image-1.5", alias="OPENAI_IMAGE_MODEL")
    gemini_image_model: str = Field(
        default="gemini-3-pro-image-preview", alias="GEMINI_IMAGE_MODEL"
    )
    review_model: str = Field(default="gpt-5.2", alias="REVIEW_MODEL")
    provider_timeout_seconds: float = Field(
        default=120.0, alias="PROVIDER_TIMEOUT_SECONDS", gt=0,
        description="Timeout applied to every provider request (connect, read, write, pool)"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Optional[str]) -> str:
        """Normalize and validate log level."""
        if not value:
            return "INFO"
        normalized = str(value).strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. "
                f"Valid options: {', '.join(VALID_LOG_LEVELS)}"
            )
        return normalized

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_allowed_origins(cls, value):
        """Accept a comma-separated string as well as a JSON list."""
        if value is None or value == "":
            return []
        if isinstance(value, str):
            stripped = value.strip().strip("[]")
            return [
                origin.strip().strip("\"'")
                for origin in stripped.split(",")
                if origin.strip().strip("\"'")
            ]
        return value

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def gemini_configured(self) -> bool:
        return bool(self.google_api_key)


settings = Settings()
