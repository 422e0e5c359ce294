"""
Core module providing shared configuration and utilities.

Usage:
    from geoquery.core import settings
    from geoquery.core.utils import Coordinate, Viewport
"""

from geoquery.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
