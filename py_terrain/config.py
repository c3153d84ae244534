"""Configuration management."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Terrain grid
    terrain_width: int = Field(default=32, gt=0, description="Cells along x")
    terrain_length: int = Field(default=32, gt=0, description="Cells along y")
    height_scale: float = Field(default=256, description="Divisor applied to sampled heights")

    # Noise
    noise_seed: Optional[int] = Field(default=None, description="Noise seed, drawn at random when unset")
    noise_octaves: int = Field(default=2, ge=1, description="Nominal octave count")
    noise_persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    noise_zoom: float = Field(default=6.0, gt=0, description="Coordinate divisor")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    @field_validator("height_scale")
    @classmethod
    def height_scale_non_zero(cls, value: float) -> float:
        if value == 0:
            raise ValueError("height_scale must be non-zero")
        return value

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, value: str) -> str:
        if value not in ("plain", "json"):
            raise ValueError(f"log_format must be 'plain' or 'json', got {value!r}")
        return value

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
