"""Answer "which district contains this point" by scanning the catalog in order."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from sigungu_geocoder.data import catalog as region_catalog
from sigungu_geocoder.data.catalog import EnrichedRegion, RegionCatalog, enrich
from sigungu_geocoder.data.geometry import Coordinate
from sigungu_geocoder.pipeline.containment import contains

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocateResult:
    region: Optional[EnrichedRegion]
    point: Coordinate


class Locator:
    """Stateless queries over a catalog handed in at construction."""

    def __init__(self, catalog: RegionCatalog) -> None:
        self._catalog = catalog

    def locate(self, longitude: float, latitude: float) -> LocateResult:
        point = Coordinate(longitude, latitude)
        for region in self._catalog:
            if contains(point, region.geometry):
                return LocateResult(region=enrich(region.identity), point=point)

        LOGGER.debug("No region contains (%s, %s)", longitude, latitude)
        return LocateResult(region=None, point=point)

    def find_by_code(self, code: str) -> Optional[EnrichedRegion]:
        for region in self._catalog:
            if region.identity.code == code:
                return enrich(region.identity)
        LOGGER.debug("No region with code %r", code)
        return None

    def find_by_name(self, name: str) -> Optional[EnrichedRegion]:
        # Names repeat across 시도 (e.g. 중구); the first in catalog order wins.
        for region in self._catalog:
            if region.identity.name == name:
                return enrich(region.identity)
        LOGGER.debug("No region named %r", name)
        return None

    def all_regions(self) -> List[EnrichedRegion]:
        return [enrich(region.identity) for region in self._catalog]


def default_locator() -> Locator:
    return Locator(region_catalog.load())


def locate(longitude: float, latitude: float) -> LocateResult:
    return default_locator().locate(longitude, latitude)


def find_by_code(code: str) -> Optional[EnrichedRegion]:
    return default_locator().find_by_code(code)


def find_by_name(name: str) -> Optional[EnrichedRegion]:
    return default_locator().find_by_name(name)


def all_regions() -> List[EnrichedRegion]:
    return default_locator().all_regions()


__all__ = [
    "LocateResult",
    "Locator",
    "all_regions",
    "default_locator",
    "find_by_code",
    "find_by_name",
    "locate",
]
