"""
YOURS (Yet another OpenStreetMap Route Service) routing provider.

Computes a driving route between two points.
http://wiki.openstreetmap.org/wiki/YOURS
"""

import logging
from typing import Dict, List, Type

from pydantic import BaseModel, Field

from geoquery.core import settings
from geoquery.core.utils.geo import Coordinate, format_degrees
from geoquery.geocoding.base import BaseProvider, Operation, Request, Summary

logger = logging.getLogger(__name__)

# Sent on every route request; not configurable.
ROUTING_PREFERENCES = {
    "v": "motorcar",
    "fast": "1",
    "layer": "mapnik",
    "format": "geojson",
    "geometry": "1",
    "distance": "v",  # Vincenty
    "instructions": "1",
    "lang": "en_US",
}

CLIENT_HEADER = "X-Client"


class RouteProperties(BaseModel):
    distance: float = 0.0  # kilometres
    description: str = ""  # turn-by-turn instructions, HTML
    traveltime: float = 0.0  # seconds


class RouteResult(BaseModel):
    type: str = ""
    coordinates: List[List[float]] = Field(default_factory=list)  # [lng, lat]
    properties: RouteProperties = Field(default_factory=RouteProperties)

    @property
    def points(self) -> List[Coordinate]:
        return [Coordinate(pair[1], pair[0]) for pair in self.coordinates if len(pair) >= 2]


class YoursRouter(BaseProvider):
    """
    YOURS routing provider.

    Usage:
        request = Request(
            provider=Provider.YOURS,
            bounds=Viewport(start, end),
        )
        response = route(request)
        response.route.properties.distance
    """

    operations = frozenset({Operation.ROUTE})

    @property
    def provider_name(self) -> str:
        return "yours"

    def endpoint(self, request: Request) -> str:
        return settings.ROUTING_URL

    def headers(self, request: Request) -> Dict[str, str]:
        return {CLIENT_HEADER: settings.ROUTING_CLIENT_ID}

    def build_parameters(self, request: Request) -> Dict[str, str]:
        start, end = request.bounds.start, request.bounds.end
        params = {
            "flat": format_degrees(start.lat),
            "flon": format_degrees(start.lng),
            "tlat": format_degrees(end.lat),
            "tlon": format_degrees(end.lng),
        }
        params.update(ROUTING_PREFERENCES)
        return params

    def payload_model(self, request: Request) -> Type[BaseModel]:
        return RouteResult

    def summarize(self, request: Request, payload: RouteResult) -> Summary:
        count = len(payload.coordinates)
        if count == 0:
            logger.debug(f"YOURS: No route for {request.target}")
        return Summary(count=count)
