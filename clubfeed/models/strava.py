"""Pydantic models for Strava API data structures."""

from typing import Any, Optional
from pydantic import BaseModel, Field, model_validator


class StravaTokens(BaseModel):
    """Strava OAuth tokens model."""
    token_type: str
    access_token: str
    expires_at: int
    refresh_token: str

    @property
    def authorization_header(self) -> str:
        """Value for the Authorization header of API requests."""
        return f"{self.token_type} {self.access_token}"


class FeedModel(BaseModel):
    """Club feed record; a JSON null falls back to the field default."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Athlete(FeedModel):
    """Club member as exposed in the club feed (names only)."""
    resource_state: Optional[int] = None
    firstname: str = ""
    lastname: str = ""


class Activity(FeedModel):
    """Summary activity from a club feed."""
    resource_state: Optional[int] = None
    athlete: Athlete = Field(default_factory=Athlete)
    name: str = ""
    distance: float = 0.0
    moving_time: int = 0
    elapsed_time: int = 0
    total_elevation_gain: float = 0.0
    type: str = ""
    sport_type: str = ""
    workout_type: Optional[int] = None
