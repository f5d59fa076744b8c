"""Strava club activity feed printer."""

__version__ = "0.1.0"
