"""Application configuration using Pydantic Settings."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Strava API Configuration
    client_id: str = Field(default="", description="Strava API Client ID")
    client_secret: str = Field(default="", description="Strava API Client Secret")
    refresh_token: str = Field(default="", description="Strava API Refresh Token")
    club_id: str = Field(default="", description="Strava club whose feed is printed")
    strava_oauth_url: str = Field(default="https://www.strava.com/oauth/token", description="Strava OAuth token endpoint")
    strava_api_base_url: str = Field(default="https://www.strava.com/api/v3", description="Strava API Base URL")
    request_timeout: float = Field(default=30.0, gt=0, description="Timeout in seconds for outbound requests")

    # Application Configuration
    schedule_interval_hours: float = Field(default=0, ge=0, description="Hours between runs (0 runs once)")
    log_level: LogLevel = Field(default="INFO", description="Log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
