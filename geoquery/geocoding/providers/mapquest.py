"""
MapQuest Open geocoder.

Free geocoding over OpenStreetMap data. Address queries go to the MapQuest
geocoding endpoint; coordinate queries go to its hosted Nominatim reverse
endpoint. The two answer with different JSON shapes.
https://nominatim.org/
"""

import logging
from typing import Optional, Dict, List, Type

from pydantic import BaseModel, ConfigDict, Field

from geoquery.core import settings
from geoquery.core.utils.geo import Coordinate, format_degrees
from geoquery.geocoding.base import BaseProvider, Request, Status, Summary

logger = logging.getLogger(__name__)


# ==========================================================================
# Reverse geocoding (Nominatim shape)
# ==========================================================================

class NominatimAddress(BaseModel):
    """Address breakdown; OSM adds many optional keys, all are kept."""

    model_config = ConfigDict(extra="allow")

    house_number: str = ""
    road: str = ""
    suburb: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""
    country_code: str = ""


class ReverseResult(BaseModel):
    display_name: str = ""
    name: str = ""
    address: NominatimAddress = Field(default_factory=NominatimAddress)
    lat: Optional[float] = None
    lon: Optional[float] = None
    osm_type: str = ""
    error: str = ""

    def to_coordinate(self) -> Optional[Coordinate]:
        if self.lat is None or self.lon is None:
            return None
        return Coordinate(self.lat, self.lon)


# ==========================================================================
# Forward geocoding (MapQuest shape)
# ==========================================================================

class LatLng(BaseModel):
    lat: float
    lng: float

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)


class Location(BaseModel):
    street: str = ""
    adminArea1: str = ""  # country
    adminArea2: str = ""
    adminArea3: str = ""  # state
    adminArea4: str = ""  # county
    adminArea5: str = ""  # city
    adminArea6: str = ""  # neighborhood
    postalCode: str = ""
    geocodeQuality: str = ""
    latLng: Optional[LatLng] = None

    @property
    def formatted_address(self) -> str:
        parts = [self.street, self.adminArea6, self.adminArea5]
        return ", ".join(p for p in parts if p)


class ForwardResult(BaseModel):
    locations: List[Location] = Field(default_factory=list)


class ForwardInfo(BaseModel):
    statuscode: int = 0
    messages: List[str] = Field(default_factory=list)


class ForwardResponse(BaseModel):
    info: Optional[ForwardInfo] = None
    results: List[ForwardResult] = Field(default_factory=list)


class MapQuestGeocoder(BaseProvider):
    """
    MapQuest Open (Nominatim) geocoder.

    Usage:
        request = Request(provider=Provider.MAPQUEST, address="Berlin")
        response = lookup(request)

    Parameters:
        q for addresses, lat and lon for coordinates (address wins when
        both are set), plus format=json and a numeric limit.
    """

    @property
    def provider_name(self) -> str:
        return "mapquest"

    @staticmethod
    def is_reverse(request: Request) -> bool:
        return not request.address and request.location is not None

    def endpoint(self, request: Request) -> str:
        if self.is_reverse(request):
            return settings.OPEN_GEOCODER_REVERSE_URL
        return settings.OPEN_GEOCODER_SEARCH_URL

    def build_parameters(self, request: Request) -> Dict[str, str]:
        if self.is_reverse(request):
            params = {
                "lat": format_degrees(request.location.lat),
                "lon": format_degrees(request.location.lng),
            }
        else:
            params = {"q": request.address}

        params["format"] = "json"
        params["limit"] = str(request.limit or settings.OPEN_GEOCODER_LIMIT)

        if request.key:
            params["key"] = request.key
        return params

    def payload_model(self, request: Request) -> Type[BaseModel]:
        return ReverseResult if self.is_reverse(request) else ForwardResponse

    def summarize(self, request: Request, payload: BaseModel) -> Summary:
        if isinstance(payload, ReverseResult):
            return self._summarize_reverse(request, payload)
        return self._summarize_forward(request, payload)

    def _summarize_reverse(self, request: Request, payload: ReverseResult) -> Summary:
        if not payload.display_name:
            logger.debug(
                f"MapQuest: No reverse match for {request.target}"
                + (f" ({payload.error})" if payload.error else "")
            )
            return Summary()

        return Summary(
            best_match=payload.address.road or payload.name,
            count=1,
        )

    def _summarize_forward(self, request: Request, payload: ForwardResponse) -> Summary:
        if payload.info is not None and payload.info.statuscode != 0:
            logger.warning(
                f"MapQuest API error {payload.info.statuscode}: "
                f"{'; '.join(payload.info.messages)}"
            )
            return Summary(
                status=Status.NOT_OK,
                provider_status=str(payload.info.statuscode),
            )

        count = sum(len(result.locations) for result in payload.results)
        if count == 0:
            logger.debug(f"MapQuest: No results for {request.target}")
            return Summary()

        # Best match comes from the first result only, even when it is empty.
        first = payload.results[0]
        return Summary(
            best_match=first.locations[0].formatted_address if first.locations else "",
            count=count,
        )
