"""Tests for the MapQuest Open (Nominatim) provider."""

import pytest

from geoquery.core import settings
from geoquery.core.utils.geo import Coordinate
from geoquery.geocoding import (
    DecodeError,
    MapQuestGeocoder,
    Provider,
    Request,
    RequestValidationError,
    Status,
    encode,
    lookup,
)
from geoquery.geocoding.providers.mapquest import ForwardResponse, ReverseResult
from tests.http_fakes import FakeTransport, json_response


def test_address_parameters():
    params = encode(Request(provider=Provider.MAPQUEST, address="Lancaster, PA"))
    assert params == {"q": "Lancaster, PA", "format": "json", "limit": "1"}


def test_location_is_split_into_lat_and_lon():
    request = Request(provider=Provider.MAPQUEST, location=Coordinate(40.71423, -73.9614))
    params = encode(request)
    assert params["lat"] == "40.71423"
    assert params["lon"] == "-73.9614"
    assert "latlng" not in params
    assert "q" not in params
    assert params["format"] == "json"


def test_limit_from_request_and_settings(monkeypatch):
    assert encode(Request(provider=Provider.MAPQUEST, address="Berlin", limit=5))["limit"] == "5"

    monkeypatch.setattr(settings, "OPEN_GEOCODER_LIMIT", 3)
    assert encode(Request(provider=Provider.MAPQUEST, address="Berlin"))["limit"] == "3"


def test_non_positive_limit_fails_validation():
    with pytest.raises(RequestValidationError):
        encode(Request(provider=Provider.MAPQUEST, address="Berlin", limit=0))


def test_missing_address_and_location_fails_validation():
    with pytest.raises(RequestValidationError):
        encode(Request(provider=Provider.MAPQUEST))


def test_endpoint_depends_on_query_kind():
    geocoder = MapQuestGeocoder()
    forward = Request(provider=Provider.MAPQUEST, address="Berlin")
    reverse = Request(provider=Provider.MAPQUEST, location=Coordinate(52.5, 13.4))
    assert geocoder.endpoint(forward) == settings.OPEN_GEOCODER_SEARCH_URL
    assert geocoder.endpoint(reverse) == settings.OPEN_GEOCODER_REVERSE_URL


def test_reverse_lookup(nominatim_reverse):
    transport = FakeTransport([json_response(nominatim_reverse)])
    request = Request(provider=Provider.MAPQUEST, location=Coordinate(40.71423, -73.9614))
    response = lookup(request, transport=transport)

    assert transport.last_url.startswith(settings.OPEN_GEOCODER_REVERSE_URL + "?")
    assert response.status == Status.OK
    assert response.count == 1
    assert response.best_match == "Bedford Avenue"

    payload = response.mapquest
    assert isinstance(payload, ReverseResult)
    assert payload.address.house_number == "277"
    assert payload.address.postcode == "11211"
    assert payload.to_coordinate() == Coordinate(40.71423, -73.9614)
    assert response.google is None


def test_reverse_lookup_empty_display_name_is_zero_results(nominatim_reverse):
    nominatim_reverse["display_name"] = ""
    transport = FakeTransport([json_response(nominatim_reverse)])
    request = Request(provider=Provider.MAPQUEST, location=Coordinate(0.0, 0.0))
    response = lookup(request, transport=transport)

    assert response.status == Status.OK
    assert response.count == 0
    assert response.best_match == ""


def test_reverse_lookup_error_body_is_zero_results():
    transport = FakeTransport([json_response({"error": "Unable to geocode"})])
    request = Request(provider=Provider.MAPQUEST, location=Coordinate(0.0, -160.0))
    response = lookup(request, transport=transport)

    assert response.status == Status.OK
    assert response.count == 0
    assert response.mapquest.to_coordinate() is None


def test_reverse_lookup_falls_back_to_name():
    body = {"display_name": "Central Park, New York", "name": "Central Park", "address": {}}
    transport = FakeTransport([json_response(body)])
    request = Request(provider=Provider.MAPQUEST, location=Coordinate(40.78, -73.96))
    response = lookup(request, transport=transport)

    assert response.count == 1
    assert response.best_match == "Central Park"


def test_forward_lookup(mapquest_forward):
    transport = FakeTransport([json_response(mapquest_forward)])
    request = Request(provider=Provider.MAPQUEST, address="100 N Queen St, Lancaster, PA", limit=2)
    response = lookup(request, transport=transport)

    assert transport.last_url.startswith(settings.OPEN_GEOCODER_SEARCH_URL + "?")
    assert transport.last_params["q"] == "100 N Queen St, Lancaster, PA"
    assert response.status == Status.OK
    assert response.best_match == "100 N Queen St, Downtown, Lancaster"
    assert response.count == 2

    payload = response.mapquest
    assert isinstance(payload, ForwardResponse)
    location = payload.results[0].locations[0]
    assert location.latLng.to_coordinate() == Coordinate(40.038817, -76.305553)
    assert location.adminArea3 == "PA"


def test_forward_lookup_without_locations():
    transport = FakeTransport([json_response({"results": [{"locations": []}]})])
    response = lookup(Request(provider=Provider.MAPQUEST, address="nowhere"), transport=transport)

    assert response.status == Status.OK
    assert response.count == 0
    assert response.best_match == ""


def test_forward_lookup_provider_error():
    body = {"info": {"statuscode": 403, "messages": ["Invalid key"]}, "results": []}
    transport = FakeTransport([json_response(body)])
    response = lookup(Request(provider=Provider.MAPQUEST, address="Berlin"), transport=transport)

    assert response.status == Status.NOT_OK
    assert response.provider_status == "403"


def test_forward_lookup_schema_mismatch():
    transport = FakeTransport([json_response({"results": "not-a-list"})])
    with pytest.raises(DecodeError):
        lookup(Request(provider=Provider.MAPQUEST, address="Berlin"), transport=transport)


def test_forward_best_match_comes_from_first_result(mapquest_forward):
    mapquest_forward["results"].insert(0, {"locations": []})
    transport = FakeTransport([json_response(mapquest_forward)])
    response = lookup(Request(provider=Provider.MAPQUEST, address="Lancaster, PA"), transport=transport)

    assert response.status == Status.OK
    assert response.count == 2
    assert response.best_match == ""
