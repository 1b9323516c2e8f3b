"""Configuration models using Pydantic for validation."""

import os
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

API_KEY_ENV = "OPENWEATHER_API_KEY"


class MissingApiKeyError(RuntimeError):
    """Raised when no OpenWeatherMap API key is configured."""


class ApiConfig(BaseModel):
    """OpenWeatherMap connection settings."""

    base_url: str = "https://api.openweathermap.org/"
    api_key: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0)
    geocode_limit: int = Field(default=1, ge=1, le=5)

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
        if not parsed.netloc:
            raise ValueError(f"Invalid URL '{v}': URL must have a valid host")
        return v if v.endswith("/") else v + "/"


class Settings(BaseModel):
    """General application settings."""

    default_location: str = "Hawaii, HI, USA"
    timezone: str | None = None  # IANA zone for day bucketing, local zone when unset
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate that the zone name is known to zoneinfo."""
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}': {e}")
        return v

    @property
    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


class Config(BaseModel):
    """Main configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()

    def resolve_api_key(self) -> str:
        """Return the API key, preferring the environment over the config file."""
        key = os.environ.get(API_KEY_ENV) or self.api.api_key
        if not key:
            raise MissingApiKeyError(
                f"No OpenWeatherMap API key. Set {API_KEY_ENV} or api.api_key in the config file."
            )
        return key
