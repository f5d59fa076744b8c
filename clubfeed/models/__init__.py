"""Data models for Strava API integration."""

from .strava import Activity, Athlete, StravaTokens

__all__ = ["Activity", "Athlete", "StravaTokens"]
