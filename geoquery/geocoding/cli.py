#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m geoquery.geocoding.cli --address "New York City"
    python -m geoquery.geocoding.cli --latlng 40.714224,-73.961452 --provider mapquest
    python -m geoquery.geocoding.cli --route 51.58,4.78 51.69,5.30 --provider yours
"""

import argparse
import logging
import sys
from typing import Optional, List

from geoquery.core.utils.geo import Coordinate, Viewport
from geoquery.geocoding import (
    GeocodingError,
    Provider,
    Request,
    Response,
    lookup,
    route,
)

logger = logging.getLogger(__name__)


def print_response(response: Response, verbose: bool = False) -> None:
    """Print a normalized response."""
    print(f"Provider: {response.provider.value}")
    print("-" * 50)
    print(f"  Status:     {response.status.value}"
          + (f" ({response.provider_status})" if response.provider_status else ""))
    print(f"  Count:      {response.count}")
    if response.best_match:
        print(f"  Best match: {response.best_match}")

    if response.route is not None:
        properties = response.route.properties
        print(f"  Distance:   {properties.distance:.2f} km")
        print(f"  Travel:     {properties.traveltime / 60:.1f} min")
        print(f"  Points:     {len(response.route.coordinates)}")

    if verbose:
        print(f"  Query:      {response.query}")
        if response.payload is not None:
            print(f"  Raw Response: {response.payload.model_dump_json(indent=2)}")


def build_request(args: argparse.Namespace) -> Request:
    """Turn parsed arguments into a Request."""
    request = Request(
        provider=Provider(args.provider),
        region=args.region or "",
        language=args.language or "",
        key=args.key or "",
        limit=args.limit,
    )

    if args.address:
        request.address = args.address
    if args.latlng:
        request.location = Coordinate.parse(args.latlng)
    if args.bounds:
        request.bounds = Viewport.parse(args.bounds)
    if args.route:
        request.bounds = Viewport(
            Coordinate.parse(args.route[0]),
            Coordinate.parse(args.route[1]),
        )
    return request


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Geocode addresses and compute routes"
    )

    parser.add_argument(
        "--address", "-a",
        type=str,
        help="Geocode a single address"
    )
    parser.add_argument(
        "--latlng",
        type=str,
        help="Reverse geocode a LAT,LNG pair"
    )
    parser.add_argument(
        "--route", "-r",
        nargs=2,
        metavar=("FROM", "TO"),
        help="Route between two LAT,LNG pairs"
    )
    parser.add_argument(
        "--provider", "-p",
        type=str,
        default=Provider.GOOGLE.value,
        choices=[p.value for p in Provider],
        help="Provider to use"
    )
    parser.add_argument(
        "--bounds",
        type=str,
        help="Viewport bias as NE_LAT,NE_LNG|SW_LAT,SW_LNG"
    )
    parser.add_argument("--region", type=str, help="Region bias (ccTLD)")
    parser.add_argument("--language", type=str, help="Result language")
    parser.add_argument("--key", type=str, help="API key")
    parser.add_argument(
        "--limit", "-l",
        type=int,
        help="Maximum number of results"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    if not (args.address or args.latlng or args.route):
        parser.print_help()
        return 2

    try:
        request = build_request(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.route:
            response = route(request)
        else:
            response = lookup(request)
    except GeocodingError as e:
        logger.error(f"Request failed: {e}")
        print(f"✗ {e}")
        return 1

    print_response(response, verbose=args.verbose)
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
