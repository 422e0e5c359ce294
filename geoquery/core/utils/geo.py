"""
Geographic value types used to build provider query parameters.

This module holds the two primitives every provider speaks:
- Coordinate: a latitude/longitude pair, encoded as "<lat>,<lng>"
- Viewport: a northeast/southwest pair, encoded as "<northeast>|<southwest>"

Usage:
    from geoquery.core.utils.geo import Coordinate, Viewport

    point = Coordinate(40.7128, -74.006)
    str(point)                      # "40.7128,-74.006"
    Coordinate.parse("40.7128,-74.006") == point  # True

    box = Viewport(Coordinate(34.24, -118.50), Coordinate(34.17, -118.60))
    str(box)                        # "34.24,-118.5|34.17,-118.6"
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


def format_degrees(value: float) -> str:
    """
    Format a float with the shortest representation that round-trips.

    Output is always positional: integral values drop the trailing ".0" so
    40.0 encodes as "40", and 1e-05 encodes as "0.00001".

    Example:
        >>> format_degrees(40.7128)
        '40.7128'
        >>> format_degrees(-74.0)
        '-74'
    """
    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class Coordinate:
    """A point on Earth in decimal degrees."""

    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{format_degrees(self.lat)},{format_degrees(self.lng)}"

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """
        Parse the "<lat>,<lng>" form produced by str().

        Raises:
            ValueError: If the text is not two comma-separated numbers
        """
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected '<lat>,<lng>', got {text!r}")
        return cls(float(parts[0].strip()), float(parts[1].strip()))


@dataclass(frozen=True)
class Viewport:
    """
    A bounding rectangle given by its northeast and southwest corners.

    Routing requests reuse the same pair as start (northeast) and end
    (southwest) points.
    """

    northeast: Coordinate
    southwest: Coordinate

    def __str__(self) -> str:
        return f"{self.northeast}|{self.southwest}"

    @classmethod
    def parse(cls, text: str) -> "Viewport":
        """
        Parse the "<northeast>|<southwest>" form produced by str().

        Raises:
            ValueError: If either corner is malformed
        """
        parts = text.split("|")
        if len(parts) != 2:
            raise ValueError(f"Expected '<northeast>|<southwest>', got {text!r}")
        return cls(Coordinate.parse(parts[0]), Coordinate.parse(parts[1]))

    @property
    def start(self) -> Coordinate:
        return self.northeast

    @property
    def end(self) -> Coordinate:
        return self.southwest

    def as_bounds(self) -> dict:
        """Convert to a min/max bounds dictionary."""
        return {
            "min_lat": min(self.northeast.lat, self.southwest.lat),
            "max_lat": max(self.northeast.lat, self.southwest.lat),
            "min_lng": min(self.northeast.lng, self.southwest.lng),
            "max_lng": max(self.northeast.lng, self.southwest.lng),
        }

    def contains(self, point: Coordinate) -> bool:
        """Check if a coordinate falls inside this viewport."""
        return is_within_bounds(point.lat, point.lng, self.as_bounds())


def is_within_bounds(
    lat: float,
    lng: float,
    bounds: Optional[dict] = None
) -> bool:
    """
    Check if coordinates are within a bounding box.

    Args:
        lat: Latitude to check
        lng: Longitude to check
        bounds: Dictionary with min_lat, max_lat, min_lng, max_lng.
                If None, any valid WGS84 coordinate is accepted.

    Returns:
        True if coordinates are within bounds

    Example:
        >>> is_within_bounds(42.26, -71.80, {"min_lat": 42.20, "max_lat": 42.35,
        ...                                  "min_lng": -71.90, "max_lng": -71.70})
        True
        >>> is_within_bounds(95.0, 0.0)
        False
    """
    if bounds is None:
        bounds = {
            "min_lat": -90.0,
            "max_lat": 90.0,
            "min_lng": -180.0,
            "max_lng": 180.0,
        }

    return (
        bounds["min_lat"] <= lat <= bounds["max_lat"] and
        bounds["min_lng"] <= lng <= bounds["max_lng"]
    )
