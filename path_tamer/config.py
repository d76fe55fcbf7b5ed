"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUBDIVISIONS = 20
DEFAULT_DISTANCE_THRESHOLD = 0.4
DEFAULT_PRECISION = 3


class Settings(BaseSettings):
    """Settings loaded from environment variables (PATH_TAMER_*) and .env files.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PATH_TAMER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Sampling
    subdivisions: int = Field(DEFAULT_SUBDIVISIONS, ge=1)  # sample parameters per segment
    distance_threshold: float = Field(DEFAULT_DISTANCE_THRESHOLD, ge=0)

    # Normalization
    target_size: float = Field(200.0, gt=0)  # height of the normalized path
    precision: int = Field(DEFAULT_PRECISION, ge=0)  # decimals in path strings
    stroke_width: float = Field(1.0, ge=0)  # added to the displayed size

    # Logging
    log_json: bool = False
    log_level: str = "INFO"


settings = Settings()
