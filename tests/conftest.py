import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from geoquery.core import settings


@pytest.fixture(autouse=True)
def _default_test_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "GOOGLE_GEOCODING_API_KEY", "")
    monkeypatch.setattr(settings, "OPEN_GEOCODER_LIMIT", 1)
    monkeypatch.setattr(settings, "ROUTING_CLIENT_ID", "geoquery-tests")
    monkeypatch.setattr(settings, "USER_AGENT", "geoquery-tests/1.0")


@pytest.fixture
def google_new_york() -> dict:
    return {
        "status": "OK",
        "results": [
            {
                "formatted_address": "New York, NY, USA",
                "address_components": [
                    {
                        "long_name": "New York",
                        "short_name": "New York",
                        "types": ["locality", "political"],
                    },
                    {
                        "long_name": "New York",
                        "short_name": "NY",
                        "types": ["administrative_area_level_1", "political"],
                    },
                    {
                        "long_name": "United States",
                        "short_name": "US",
                        "types": ["country", "political"],
                    },
                ],
                "geometry": {
                    "bounds": {
                        "northeast": {"lat": 40.9175771, "lng": -73.70027209999999},
                        "southwest": {"lat": 40.4773991, "lng": -74.25908989999999},
                    },
                    "location": {"lat": 40.7127753, "lng": -74.0059728},
                    "location_type": "APPROXIMATE",
                    "viewport": {
                        "northeast": {"lat": 40.9175771, "lng": -73.70027209999999},
                        "southwest": {"lat": 40.4773991, "lng": -74.25908989999999},
                    },
                },
                "place_id": "ChIJOwg_06VPwokRYv534QaPC8g",
                "types": ["locality", "political"],
            }
        ],
    }


@pytest.fixture
def nominatim_reverse() -> dict:
    return {
        "place_id": "62762024",
        "osm_type": "way",
        "lat": "40.71423",
        "lon": "-73.9614",
        "display_name": "Bedford Avenue, Williamsburg, Brooklyn, Kings County, New York, 11211, United States",
        "address": {
            "house_number": "277",
            "road": "Bedford Avenue",
            "suburb": "Williamsburg",
            "city": "New York",
            "county": "Kings County",
            "state": "New York",
            "postcode": "11211",
            "country": "United States",
            "country_code": "us",
        },
    }


@pytest.fixture
def mapquest_forward() -> dict:
    return {
        "info": {"statuscode": 0, "messages": []},
        "results": [
            {
                "providedLocation": {"location": "Lancaster, PA"},
                "locations": [
                    {
                        "street": "100 N Queen St",
                        "adminArea6": "Downtown",
                        "adminArea5": "Lancaster",
                        "adminArea4": "Lancaster County",
                        "adminArea3": "PA",
                        "adminArea1": "US",
                        "postalCode": "17603",
                        "geocodeQuality": "ADDRESS",
                        "latLng": {"lat": 40.038817, "lng": -76.305553},
                    },
                    {
                        "street": "",
                        "adminArea5": "Lancaster",
                        "adminArea3": "PA",
                        "adminArea1": "US",
                        "geocodeQuality": "CITY",
                        "latLng": {"lat": 40.037875, "lng": -76.305514},
                    },
                ],
            }
        ],
    }


@pytest.fixture
def yours_route() -> dict:
    return {
        "type": "LineString",
        "crs": {"type": "name", "properties": {"name": "urn:ogc:def:crs:OGC:1.3:CRS84"}},
        "coordinates": [
            [4.783, 51.5834],
            [4.7902, 51.5861],
            [5.2926, 51.6877],
        ],
        "properties": {
            "distance": "43.921",
            "description": "Go straight ahead.<br>Turn right.<br>",
            "traveltime": "2195",
        },
    }
