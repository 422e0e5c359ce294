"""
geoquery: one request/response shape over several geocoding and routing
providers (Google Geocoding, MapQuest Open / Nominatim, YOURS routing).
"""

__version__ = "0.1.0"
