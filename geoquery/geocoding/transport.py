"""
HTTP transport used to reach the providers.

The dispatcher only needs "GET this URL, give me status and body". Any
object implementing Transport can be passed in; the default wraps a
requests.Session.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict

import requests

from geoquery.core import settings
from geoquery.geocoding.base import TransportError

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """Status code and raw body of one HTTP exchange."""

    status_code: int
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)


class Transport(ABC):
    """Sends a single HTTP GET."""

    @abstractmethod
    def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None
    ) -> TransportResponse:
        """
        Issue a GET request.

        Args:
            url: Full URL including the query string
            headers: Extra request headers

        Returns:
            TransportResponse for any status code

        Raises:
            TransportError: If no response was received
        """
        pass


class RequestsTransport(Transport):
    """
    Transport backed by requests.

    A session passed in is reused and left open for its owner to close.
    Without one, each call opens and closes its own session.

    Usage:
        with requests.Session() as session:
            transport = RequestsTransport(session=session, timeout=5)
            response = lookup(request, transport=transport)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the transport.

        Args:
            session: Session to reuse (a short-lived one per call if not provided)
            timeout: Seconds to wait (uses settings if not provided)
        """
        self.session = session
        self.timeout = timeout if timeout is not None else settings.GEOCODER_TIMEOUT

    def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None
    ) -> TransportResponse:
        if self.session is not None:
            return self._send(self.session, url, headers)

        with requests.Session() as session:
            return self._send(session, url, headers)

    def _send(
        self,
        session: requests.Session,
        url: str,
        headers: Optional[Dict[str, str]]
    ) -> TransportResponse:
        # Never log or echo the URL: its query string may carry an API key.
        try:
            response = session.get(url, headers=headers, timeout=self.timeout)
        except requests.Timeout as e:
            logger.warning(f"Timeout after {self.timeout}s")
            raise TransportError(f"Timeout after {self.timeout}s") from e
        except requests.RequestException as e:
            logger.warning(f"Request error: {type(e).__name__}")
            raise TransportError(f"Request failed: {type(e).__name__}") from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
