"""
Geocoding and routing over several providers behind one request shape.

Providers:
- Google: Google Geocoding API (paid, accurate)
- MapQuest: MapQuest Open / Nominatim (free, OpenStreetMap data)
- YOURS: OpenStreetMap route service (routing only)

Usage:
    from geoquery.geocoding import Request, Provider, lookup, route

    response = lookup(Request(address="New York City"))
    print(response.status, response.count, response.best_match)
"""

from geoquery.geocoding.base import (
    Provider,
    Operation,
    Status,
    Request,
    Response,
    Summary,
    BaseProvider,
    GeocodingError,
    RequestValidationError,
    TransportError,
    HTTPStatusError,
    DecodeError,
)
from geoquery.geocoding.transport import Transport, TransportResponse, RequestsTransport
from geoquery.geocoding.providers.google import GoogleGeocoder
from geoquery.geocoding.providers.mapquest import MapQuestGeocoder
from geoquery.geocoding.providers.yours import YoursRouter
from geoquery.geocoding.facade import get_provider, encode, send, lookup, route

__all__ = [
    # Request / response
    "Provider",
    "Operation",
    "Status",
    "Request",
    "Response",
    "Summary",
    # Errors
    "GeocodingError",
    "RequestValidationError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    # Transport
    "Transport",
    "TransportResponse",
    "RequestsTransport",
    # Providers
    "BaseProvider",
    "GoogleGeocoder",
    "MapQuestGeocoder",
    "YoursRouter",
    # Dispatch
    "get_provider",
    "encode",
    "send",
    "lookup",
    "route",
]
