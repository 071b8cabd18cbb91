"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = WEATHERAPI_BASE_URL
    api_key: str = ""  # fallback when WEATHER_API_KEY is unset
    forecast_days: int = Field(default=3, ge=1, le=14)
    air_quality: bool = True


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    format: OutputFormat = OutputFormat.TEXT


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.WARNING
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
