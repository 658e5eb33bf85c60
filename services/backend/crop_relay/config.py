"""Application configuration driven by environment variables."""

from functools import lru_cache
from typing import Iterable

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        enable_decoding=False,
        extra="ignore",
        populate_by_name=True,
    )

    prediction_api_url: str = Field(
        default="http://localhost:5000/predict",
        validation_alias=AliasChoices("PREDICTION_API_URL", "FLASK_API_URL"),
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    @field_validator("prediction_api_url", mode="before")
    @classmethod
    def _check_url(cls, value: str | None) -> str:
        url = (value or "").strip()
        if not url:
            raise ValueError("prediction API URL must not be empty")
        if not url.lower().startswith(("http://", "https://")):
            raise ValueError("prediction API URL must start with http:// or https://")
        return url

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | Iterable[str] | None) -> list[str]:
        if value is None or value == "":
            return ["*"]
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return [origin.strip() for origin in value if origin.strip()]

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str | None) -> str:
        return (value or "INFO").strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
