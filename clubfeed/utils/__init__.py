"""Utility modules for the application."""

from .auth import StravaAuthHelper
from .formatting import format_activity

__all__ = ["StravaAuthHelper", "format_activity"]
