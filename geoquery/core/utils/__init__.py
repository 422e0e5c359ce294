"""
Shared utility functions for geoquery.

Modules:
- geo: Coordinate and viewport value types, bounds checking

Usage:
    from geoquery.core.utils import Coordinate, Viewport

    point = Coordinate(40.7128, -74.006)
    str(point)  # "40.7128,-74.006"
"""

from geoquery.core.utils.geo import (
    Coordinate,
    Viewport,
    format_degrees,
    is_within_bounds,
)

__all__ = [
    "Coordinate",
    "Viewport",
    "format_degrees",
    "is_within_bounds",
]
