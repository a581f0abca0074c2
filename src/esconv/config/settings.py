"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ESCONV_",
        case_sensitive=False,
        extra="ignore",
    )

    # Confidence intervals
    ci_level: float = Field(0.95, gt=0.0, lt=1.0, description="Coverage of ci.lo/ci.hi")

    # Conversion defaults
    default_es_type: str = Field("d", description="Target metric used when none is given")

    # Output
    csv_float_format: str = Field("%.6f", description="Float format for converted CSV tables")

    # Logging
    log_level: str = Field("INFO")
    log_format: str = Field("text", pattern="^(json|text)$")


# Instantiate global settings
settings = Settings()
