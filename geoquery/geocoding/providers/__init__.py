"""
Provider implementations.
"""

from geoquery.geocoding.providers.google import GoogleGeocoder
from geoquery.geocoding.providers.mapquest import MapQuestGeocoder
from geoquery.geocoding.providers.yours import YoursRouter

__all__ = ["GoogleGeocoder", "MapQuestGeocoder", "YoursRouter"]
