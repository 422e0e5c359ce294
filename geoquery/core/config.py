"""
Centralized configuration management for geoquery.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from geoquery.core.config import settings

    # Access configuration
    print(settings.GOOGLE_GEOCODING_API_KEY)
    print(settings.GEOCODER_TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # API Keys
    # ==========================================================================
    GOOGLE_GEOCODING_API_KEY: str = field(
        default_factory=lambda: os.getenv("GOOGLE_GEOCODING_API_KEY", "")
    )

    # ==========================================================================
    # Provider Base URLs
    # ==========================================================================
    GOOGLE_GEOCODING_URL: str = field(
        default_factory=lambda: os.getenv(
            "GOOGLE_GEOCODING_URL",
            "https://maps.googleapis.com/maps/api/geocode/json"
        )
    )
    OPEN_GEOCODER_SEARCH_URL: str = field(
        default_factory=lambda: os.getenv(
            "OPEN_GEOCODER_SEARCH_URL",
            "https://open.mapquestapi.com/geocoding/v1/address"
        )
    )
    OPEN_GEOCODER_REVERSE_URL: str = field(
        default_factory=lambda: os.getenv(
            "OPEN_GEOCODER_REVERSE_URL",
            "https://open.mapquestapi.com/nominatim/v1/reverse.php"
        )
    )
    ROUTING_URL: str = field(
        default_factory=lambda: os.getenv(
            "ROUTING_URL",
            "http://www.yournavigation.org/api/1.0/gosmore.php"
        )
    )

    # ==========================================================================
    # Request Settings
    # ==========================================================================
    GEOCODER_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("GEOCODER_TIMEOUT", "10"))
    )
    OPEN_GEOCODER_LIMIT: int = field(
        default_factory=lambda: int(os.getenv("OPEN_GEOCODER_LIMIT", "1"))
    )

    # ==========================================================================
    # Client Identification
    # ==========================================================================
    ROUTING_CLIENT_ID: str = field(
        default_factory=lambda: os.getenv("ROUTING_CLIENT_ID", "geoquery")
    )
    USER_AGENT: str = field(
        default_factory=lambda: os.getenv("USER_AGENT", "geoquery/0.1.0")
    )

    def validate_google_geocoding(self) -> bool:
        """Check if Google Geocoding API key is configured."""
        return bool(self.GOOGLE_GEOCODING_API_KEY)


# Singleton settings instance
settings = Settings()
