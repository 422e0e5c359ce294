"""
Base classes and interfaces for geocoding and routing providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Dict, Any, FrozenSet, Tuple, Type

from pydantic import BaseModel, ValidationError

from geoquery.core.utils.geo import Coordinate, Viewport


class Provider(str, Enum):
    """External service a Request is sent to."""
    GOOGLE = "google"
    MAPQUEST = "mapquest"
    YOURS = "yours"


class Operation(str, Enum):
    """What the caller wants from the provider."""
    GEOCODE = "geocode"
    ROUTE = "route"


class Status(str, Enum):
    """Normalized outcome of a call that reached the provider."""
    OK = "ok"
    NOT_OK = "not-ok"


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, provider: str = "", address: str = ""):
        self.message = message
        self.provider = provider
        self.address = address
        super().__init__(f"[{provider}] {message}" if provider else message)


class RequestValidationError(GeocodingError):
    """The Request is malformed; raised before any network call."""


class TransportError(GeocodingError):
    """The HTTP call could not complete (connection failure, timeout)."""


class HTTPStatusError(GeocodingError):
    """The provider answered with a status other than 200."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: bytes = b"",
        provider: str = "",
        address: str = "",
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(message, provider=provider, address=address)


class DecodeError(GeocodingError):
    """A 200 response whose body does not match the provider's schema."""


@dataclass
class Request:
    """
    A single geocoding or routing request.

    Geocoding needs `address` or `location`; when both are set the address
    is used. Routing needs `bounds`, read as start (northeast) and end
    (southwest). Parameters are rebuilt from the fields on every call, so a
    Request may be edited and sent again.
    """

    provider: Provider = Provider.GOOGLE
    operation: Operation = Operation.GEOCODE

    address: str = ""
    location: Optional[Coordinate] = None
    bounds: Optional[Viewport] = None

    region: str = ""
    language: str = ""
    key: str = ""
    limit: Optional[int] = None

    # Legacy field; Google still expects it on every call.
    sensor: bool = False

    @property
    def target(self) -> str:
        """Human-readable description of what is being looked up."""
        if self.operation == Operation.ROUTE and self.bounds is not None:
            return f"{self.bounds.start} -> {self.bounds.end}"
        if self.address:
            return self.address
        if self.location is not None:
            return str(self.location)
        return ""


@dataclass
class Summary:
    """Derived fields computed from a provider payload."""

    status: Status = Status.OK
    best_match: str = ""
    count: int = 0
    provider_status: str = ""


@dataclass
class Response:
    """
    Normalized result of one call.

    `payload` holds the decoded provider body; which model it is follows
    from `provider`. Use the typed accessors to read it.
    """

    provider: Provider
    status: Status
    query: str
    best_match: str = ""
    count: int = 0
    provider_status: str = ""
    payload: Optional[BaseModel] = None

    @property
    def ok(self) -> bool:
        return self.status == Status.OK

    @property
    def found(self) -> str:
        """Alias for best_match."""
        return self.best_match

    @property
    def google(self) -> Optional[BaseModel]:
        """Google payload, or None for other providers."""
        return self.payload if self.provider == Provider.GOOGLE else None

    @property
    def mapquest(self) -> Optional[BaseModel]:
        """MapQuest payload (reverse or forward), or None for other providers."""
        return self.payload if self.provider == Provider.MAPQUEST else None

    @property
    def route(self) -> Optional[BaseModel]:
        """YOURS route payload, or None for other providers."""
        return self.payload if self.provider == Provider.YOURS else None

    @property
    def results(self) -> List[Any]:
        """Google result list; empty for other providers."""
        if self.google is None:
            return []
        return list(self.payload.results)

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "provider": self.provider.value,
            "status": self.status.value,
            "query": self.query,
            "best_match": self.best_match,
            "count": self.count,
            "provider_status": self.provider_status,
            "payload": self.payload.model_dump() if self.payload is not None else None,
        }


class BaseProvider(ABC):
    """
    Abstract base class for providers.

    Subclasses must implement:
    - provider_name: Name of the provider
    - endpoint(): Base URL for a request
    - build_parameters(): Query parameters for a request
    - payload_model(): Pydantic model the response body decodes into
    - summarize(): Derived summary fields for a decoded payload

    Optional overrides:
    - operations: Operations the provider supports (default: geocode)
    - headers(): Extra HTTP headers
    """

    operations: FrozenSet[Operation] = frozenset({Operation.GEOCODE})

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the provider."""
        pass

    @abstractmethod
    def endpoint(self, request: Request) -> str:
        """Base URL the request is sent to."""
        pass

    @abstractmethod
    def build_parameters(self, request: Request) -> Dict[str, str]:
        """
        Map a validated Request onto the provider's query parameters.

        Args:
            request: Request that already passed validate()

        Returns:
            Dict of parameter name to string value
        """
        pass

    @abstractmethod
    def payload_model(self, request: Request) -> Type[BaseModel]:
        """Pydantic model the response body is decoded into."""
        pass

    @abstractmethod
    def summarize(self, request: Request, payload: BaseModel) -> Summary:
        """Compute status, best match and result count from a payload."""
        pass

    def headers(self, request: Request) -> Dict[str, str]:
        """Provider-specific HTTP headers."""
        return {}

    def validate(self, request: Request) -> None:
        """
        Check a Request before anything is sent.

        Raises:
            RequestValidationError: If the request cannot be encoded
        """
        if request.operation not in self.operations:
            raise RequestValidationError(
                f"{request.operation.value} is not supported",
                provider=self.provider_name,
                address=request.target,
            )

        if request.operation == Operation.GEOCODE:
            if not request.address and request.location is None:
                raise RequestValidationError(
                    "neither address nor location set",
                    provider=self.provider_name,
                )
        elif request.operation == Operation.ROUTE:
            if request.bounds is None:
                raise RequestValidationError(
                    "route requires a viewport",
                    provider=self.provider_name,
                )

        if request.limit is not None and request.limit < 1:
            raise RequestValidationError(
                f"limit must be positive, got {request.limit}",
                provider=self.provider_name,
                address=request.target,
            )

    def parse_response(
        self,
        request: Request,
        body: bytes
    ) -> Tuple[BaseModel, Summary]:
        """
        Decode a 200 response body and summarize it.

        Raises:
            DecodeError: If the body is not valid JSON for the payload model
        """
        model = self.payload_model(request)
        try:
            payload = model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Could not decode {model.__name__}: {e.error_count()} error(s)",
                provider=self.provider_name,
                address=request.target,
            ) from e

        return payload, self.summarize(request, payload)
