"""Command-line entry point for the 시군구 geocoder."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Optional, Sequence

from sigungu_geocoder.config import Settings
from sigungu_geocoder.data.catalog import EnrichedRegion
from sigungu_geocoder.pipeline.distance import DistanceUnit, distance
from sigungu_geocoder.pipeline.locator import Locator, default_locator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _format_region(region: EnrichedRegion, as_json: bool) -> str:
    if as_json:
        return json.dumps(dataclasses.asdict(region), ensure_ascii=False)
    return f"{region.code}\t{region.full_name}"


def _print_region(region: Optional[EnrichedRegion], as_json: bool, missing: str) -> int:
    if region is None:
        print(json.dumps(None) if as_json else missing)
        return 1
    print(_format_region(region, as_json))
    return 0


def run_command(args: argparse.Namespace, settings: Settings, locator: Locator) -> int:
    as_json = args.json or settings.json_output

    if args.command == "locate":
        result = locator.locate(args.longitude, args.latitude)
        if as_json:
            region = dataclasses.asdict(result.region) if result.region else None
            print(json.dumps({"region": region, "point": result.point._asdict()}, ensure_ascii=False))
            return 0 if result.region else 1
        return _print_region(result.region, False, f"No region found at ({args.longitude}, {args.latitude})")

    if args.command == "code":
        return _print_region(locator.find_by_code(args.code), as_json, f"No region with code {args.code}")

    if args.command == "name":
        return _print_region(locator.find_by_name(args.name), as_json, f"No region named {args.name}")

    if args.command == "list":
        for region in locator.all_regions():
            print(_format_region(region, as_json))
        return 0

    if args.command == "distance":
        unit = DistanceUnit(args.unit) if args.unit else settings.distance_unit
        value = distance(args.lat1, args.lon1, args.lat2, args.lon2, unit)
        if as_json:
            print(json.dumps({"distance": value, "unit": unit.value}))
        else:
            print(f"{value} {unit.value}")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve coordinates to Korean 시군구 districts")
    parser.add_argument("--json", action="store_true", help="Print JSON records instead of plain text")
    subparsers = parser.add_subparsers(dest="command", required=True)

    locate_parser = subparsers.add_parser("locate", help="Find the district containing a coordinate")
    locate_parser.add_argument("longitude", type=float)
    locate_parser.add_argument("latitude", type=float)

    code_parser = subparsers.add_parser("code", help="Look up a district by its code")
    code_parser.add_argument("code")

    name_parser = subparsers.add_parser("name", help="Look up a district by its exact name")
    name_parser.add_argument("name")

    subparsers.add_parser("list", help="List every district in catalog order")

    distance_parser = subparsers.add_parser("distance", help="Great-circle distance between two points")
    for dest in ("lat1", "lon1", "lat2", "lon2"):
        distance_parser.add_argument(dest, type=float)
    distance_parser.add_argument("--unit", choices=[u.value for u in DistanceUnit], default=None)

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings.load()
    configure_logging(settings.log_level)
    logger.debug("Running %s command", args.command)

    return run_command(args, settings, default_locator())


if __name__ == "__main__":
    sys.exit(main())
