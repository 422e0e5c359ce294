"""
Google Geocoding API provider.

Paid, accurate geocoding service.
https://developers.google.com/maps/documentation/geocoding
"""

import logging
from typing import Optional, Dict, List, Type

from pydantic import BaseModel, Field

from geoquery.core import settings
from geoquery.core.utils.geo import Coordinate, Viewport
from geoquery.geocoding.base import BaseProvider, Request, Status, Summary

logger = logging.getLogger(__name__)

# Statuses that mean "the call worked", including an empty match list.
SUCCESS_STATUSES = ("OK", "ZERO_RESULTS")


class Point(BaseModel):
    lat: float
    lng: float

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)


class Bounds(BaseModel):
    northeast: Point
    southwest: Point

    def to_viewport(self) -> Viewport:
        return Viewport(self.northeast.to_coordinate(), self.southwest.to_coordinate())


class AddressPart(BaseModel):
    """One component of a formatted address (street number, locality, ...)."""
    long_name: str = ""
    short_name: str = ""
    types: List[str] = Field(default_factory=list)


class Geometry(BaseModel):
    location: Point
    location_type: str = ""  # e.g. "ROOFTOP", "APPROXIMATE"
    viewport: Optional[Bounds] = None
    bounds: Optional[Bounds] = None


class GoogleResult(BaseModel):
    formatted_address: str = ""
    address_components: List[AddressPart] = Field(default_factory=list)
    geometry: Optional[Geometry] = None
    types: List[str] = Field(default_factory=list)
    place_id: str = ""

    def component(self, kind: str) -> Optional[AddressPart]:
        """First address component tagged with the given type."""
        for part in self.address_components:
            if kind in part.types:
                return part
        return None


class GoogleResponse(BaseModel):
    status: str
    results: List[GoogleResult] = Field(default_factory=list)
    error_message: str = ""


class GoogleGeocoder(BaseProvider):
    """
    Google Geocoding API provider.

    Usage:
        request = Request(provider=Provider.GOOGLE, address="New York City")
        response = lookup(request)  # Uses GOOGLE_GEOCODING_API_KEY if no key set

    Parameters:
        address or latlng (address wins when both are set), plus optional
        bounds, region, language and key. sensor is always sent.
    """

    @property
    def provider_name(self) -> str:
        return "google"

    def endpoint(self, request: Request) -> str:
        return settings.GOOGLE_GEOCODING_URL

    def build_parameters(self, request: Request) -> Dict[str, str]:
        params = {}

        if request.address:
            params["address"] = request.address
            if request.location is not None:
                logger.debug(
                    f"Google: address and location both set, "
                    f"ignoring location {request.location}"
                )
        else:
            params["latlng"] = str(request.location)

        if request.bounds is not None:
            params["bounds"] = str(request.bounds)
        if request.region:
            params["region"] = request.region
        if request.language:
            params["language"] = request.language

        key = request.key or settings.GOOGLE_GEOCODING_API_KEY
        if key:
            params["key"] = key

        params["sensor"] = "true" if request.sensor else "false"
        return params

    def payload_model(self, request: Request) -> Type[BaseModel]:
        return GoogleResponse

    def summarize(self, request: Request, payload: GoogleResponse) -> Summary:
        if payload.status not in SUCCESS_STATUSES:
            logger.warning(
                f"Google API error: {payload.status} "
                f"{payload.error_message}".rstrip()
            )
            return Summary(status=Status.NOT_OK, provider_status=payload.status)

        if not payload.results:
            logger.debug(f"Google: No results for {request.target}")
            return Summary(provider_status=payload.status)

        return Summary(
            best_match=payload.results[0].formatted_address,
            count=len(payload.results),
            provider_status=payload.status,
        )
