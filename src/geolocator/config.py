"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="GEO_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Tanzania Geolocation API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root log level for the service.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Country bounding box as (south, west, north, east) in decimal degrees.
    country_bounds: tuple[float, float, float, float] = Field(
        default=(-11.75, 29.3, -0.95, 40.5),
        description="Inclusive latitude/longitude box used to sanity-check coordinates.",
    )

    # Forward resolution
    resolution_chain: tuple[str, ...] = Field(
        default=("locality", "region"),
        description="Ordered names of the resolution strategies tried for each request.",
    )
    locality_jitter_degrees: float = Field(default=0.01, ge=0.0, description="Jitter window for locality matches.")
    region_jitter_degrees: float = Field(default=0.1, ge=0.0, description="Jitter window for region matches.")
    locality_confidence: int = Field(default=85, ge=0, le=100)
    region_confidence: int = Field(default=60, ge=0, le=100)
    jitter_mode: Literal["random", "deterministic", "none"] = Field(
        default="deterministic",
        description="How positional jitter is drawn: seeded PRNG, hash of the request, or disabled.",
    )
    jitter_seed: Optional[int] = Field(default=None, description="Seed for the random jitter mode.")

    # Reverse classification
    strict_classification_km: float = Field(default=150.0, gt=0.0)
    approx_classification_km: float = Field(default=200.0, gt=0.0)
    strict_confidence: int = Field(default=90, ge=0, le=100)
    approx_min_confidence: int = Field(default=20, ge=0, le=100)
    tie_epsilon_km: float = Field(default=1e-9, ge=0.0)

    batch_max_workers: int = Field(default=8, ge=1)

    @field_validator("frontend_allowed_origins", "resolution_chain", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("country_bounds", mode="before")
    @classmethod
    def _parse_bounds_from_env(cls, value: Any) -> tuple[float, ...]:
        """Parse the bounding box from a JSON array or comma-separated string."""
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except (json.JSONDecodeError, TypeError):
                parsed = [item.strip() for item in value.split(",") if item.strip()]
            return tuple(float(item) for item in parsed)
        if isinstance(value, list):
            return tuple(float(item) for item in value)
        return value

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        south, west, north, east = self.country_bounds
        if south > north or west > east:
            raise ValueError("country_bounds must be ordered as (south, west, north, east)")
        if self.strict_classification_km > self.approx_classification_km:
            raise ValueError("strict_classification_km must not exceed approx_classification_km")
        return self


settings = Settings()
