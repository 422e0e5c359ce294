"""
Request dispatcher providing a simple interface to all providers.
"""

import logging
from dataclasses import replace
from typing import Optional, Dict, Union
from urllib.parse import urlencode

from geoquery.core import settings
from geoquery.geocoding.base import (
    BaseProvider,
    HTTPStatusError,
    Operation,
    Provider,
    Request,
    Response,
    TransportError,
)
from geoquery.geocoding.providers.google import GoogleGeocoder
from geoquery.geocoding.providers.mapquest import MapQuestGeocoder
from geoquery.geocoding.providers.yours import YoursRouter
from geoquery.geocoding.transport import Transport, RequestsTransport

logger = logging.getLogger(__name__)

_PROVIDERS = {
    Provider.GOOGLE: GoogleGeocoder,
    Provider.MAPQUEST: MapQuestGeocoder,
    Provider.YOURS: YoursRouter,
}


def get_provider(provider: Union[Provider, str] = Provider.GOOGLE) -> BaseProvider:
    """
    Get a provider instance by name.

    Args:
        provider: Provider enum or name ("google", "mapquest", "yours")

    Returns:
        Provider instance
    """
    try:
        key = Provider(provider)
    except ValueError:
        raise ValueError(
            f"Unknown provider: {provider}. Choose from: {[p.value for p in _PROVIDERS]}"
        )

    return _PROVIDERS[key]()


def encode(request: Request) -> Dict[str, str]:
    """
    Validate a Request and build its query parameters.

    Nothing is sent; the result is recomputed on every call.

    Raises:
        RequestValidationError: If the request is malformed
    """
    provider = get_provider(request.provider)
    provider.validate(request)
    return provider.build_parameters(request)


def send(request: Request, transport: Optional[Transport] = None) -> Response:
    """
    Send a Request to its provider and normalize the answer.

    Args:
        request: Request with provider and operation set
        transport: HTTP transport (a requests-backed one if not provided)

    Returns:
        Response; status is NOT_OK only when the provider reported a failure

    Raises:
        RequestValidationError: Malformed request, nothing was sent
        TransportError: The HTTP call did not complete
        HTTPStatusError: The provider answered with a non-200 status
        DecodeError: The 200 body did not match the provider's schema
    """
    provider = get_provider(request.provider)
    provider.validate(request)

    params = provider.build_parameters(request)
    query = urlencode(sorted(params.items()))
    url = f"{provider.endpoint(request)}?{query}"

    headers = {"User-Agent": settings.USER_AGENT}
    headers.update(provider.headers(request))

    transport = transport or RequestsTransport()
    logger.debug(
        f"{provider.provider_name}: GET {provider.endpoint(request)} "
        f"for {request.target}"
    )
    try:
        http_response = transport.get(url, headers=headers)
    except TransportError as e:
        raise TransportError(
            e.message,
            provider=provider.provider_name,
            address=request.target,
        ) from e

    if http_response.status_code != 200:
        logger.warning(
            f"{provider.provider_name} HTTP {http_response.status_code} "
            f"for {request.target}"
        )
        raise HTTPStatusError(
            f"HTTP {http_response.status_code}",
            status_code=http_response.status_code,
            body=http_response.body,
            provider=provider.provider_name,
            address=request.target,
        )

    payload, summary = provider.parse_response(request, http_response.body)
    logger.debug(
        f"{provider.provider_name}: {summary.status.value}, "
        f"{summary.count} result(s) for {request.target}"
    )

    return Response(
        provider=Provider(request.provider),
        status=summary.status,
        query=query,
        best_match=summary.best_match,
        count=summary.count,
        provider_status=summary.provider_status,
        payload=payload,
    )


def lookup(request: Request, transport: Optional[Transport] = None) -> Response:
    """
    Geocode an address or reverse geocode a location.

    Example:
        response = lookup(Request(address="New York City"))
        if response.ok and response.count:
            print(response.best_match)
    """
    return send(replace(request, operation=Operation.GEOCODE), transport=transport)


def route(request: Request, transport: Optional[Transport] = None) -> Response:
    """
    Compute a route between request.bounds.start and request.bounds.end.

    Example:
        response = route(Request(provider=Provider.YOURS, bounds=viewport))
        print(response.route.properties.distance)
    """
    return send(replace(request, operation=Operation.ROUTE), transport=transport)
