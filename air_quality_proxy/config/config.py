from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    The OpenWeatherMap key is optional: a missing key is
    reported per request by the air quality handler instead of failing at startup.
    """

    # API Keys
    openweather_api_key: Optional[str] = Field(
        default=None, description="OpenWeatherMap API key used for upstream requests"
    )

    # OpenWeatherMap Configuration
    openweather_air_pollution_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/air_pollution",
        description="OpenWeatherMap air pollution endpoint",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs to the logs/ directory")

    @field_validator("openweather_api_key")
    def validate_openweather_api_key(cls, v):
        # Blank values count as not set
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    @property
    def api_key_configured(self) -> bool:
        return self.openweather_api_key is not None

    def get_log_file_path(self) -> Path:
        """Get the log file path for the current environment."""
        return Path("logs") / f"air_quality_proxy_{self.environment}.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
