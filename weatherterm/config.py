"""Configuration management for the project."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHERTERM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Location
    country: str = Field(default="")
    city: str = Field(default="")

    # OpenWeatherMap API
    api_key: Optional[str] = Field(default=None)
    openweather_base_url: str = Field(default="https://api.openweathermap.org/data/2.5")
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=0, ge=0)

    # Report
    unit: str = Field(default="metric")
    sleep_seconds: int = Field(default=300, gt=0)
    output_file: str = Field(default_factory=lambda: str(Path.home() / ".weatherterm"))

    # City dataset (defaults to the bundled sample)
    city_list_path: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")


settings = Settings()
