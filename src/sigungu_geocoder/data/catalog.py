"""The fixed, process-wide collection of 시군구 regions."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from sigungu_geocoder.data.geometry import Geometry

LOGGER = logging.getLogger(__name__)

UNKNOWN_PARENT_NAME = "알 수 없음"

# 시도 code prefix -> display name
PARENT_UNITS: Dict[str, str] = {
    "11": "서울특별시",
    "26": "부산광역시",
    "27": "대구광역시",
    "28": "인천광역시",
    "29": "광주광역시",
    "30": "대전광역시",
    "31": "울산광역시",
    "36": "세종특별자치시",
    "41": "경기도",
    "42": "강원특별자치도",
    "43": "충청북도",
    "44": "충청남도",
    "45": "전북특별자치도",
    "46": "전라남도",
    "47": "경상북도",
    "48": "경상남도",
    "50": "제주특별자치도",
}


class RegionIdentity(NamedTuple):
    code: str
    name: str


class Region(NamedTuple):
    identity: RegionIdentity
    geometry: Geometry


@dataclass(frozen=True)
class EnrichedRegion:
    code: str
    name: str
    parent_code: str
    parent_name: str

    @property
    def full_name(self) -> str:
        return f"{self.parent_name} {self.name}"


def enrich(identity: RegionIdentity) -> EnrichedRegion:
    """Attach the parent 시도 derived from the first two characters of the code."""
    parent_code = identity.code[:2]
    return EnrichedRegion(
        code=identity.code,
        name=identity.name,
        parent_code=parent_code,
        parent_name=PARENT_UNITS.get(parent_code, UNKNOWN_PARENT_NAME),
    )


@dataclass(frozen=True)
class RegionCatalog:
    """Immutable, ordered set of regions. Order decides ties between overlapping shapes."""

    regions: Tuple[Region, ...]

    @classmethod
    def from_source(cls, source: Iterable[Tuple[str, str, Geometry]]) -> "RegionCatalog":
        regions = []
        seen = set()
        for code, name, geometry in source:
            if len(code) < 2:
                raise ValueError(f"Region code {code!r} is too short to carry a parent prefix")
            if code in seen:
                raise ValueError(f"Duplicate region code {code!r}")
            seen.add(code)
            regions.append(Region(RegionIdentity(code, name), geometry))
        return cls(tuple(regions))

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self):
        return iter(self.regions)


_catalog: Optional[RegionCatalog] = None
_catalog_lock = threading.Lock()


def load() -> RegionCatalog:
    """Return the default catalog, building it from the embedded boundaries on first use."""
    global _catalog

    if _catalog is not None:
        return _catalog

    with _catalog_lock:
        if _catalog is None:
            from sigungu_geocoder.data.boundaries import SIGUNGU_BOUNDARIES

            _catalog = RegionCatalog.from_source(SIGUNGU_BOUNDARIES)
            LOGGER.info("Loaded %d regions into the catalog", len(_catalog))
    return _catalog


__all__ = [
    "EnrichedRegion",
    "PARENT_UNITS",
    "Region",
    "RegionCatalog",
    "RegionIdentity",
    "UNKNOWN_PARENT_NAME",
    "enrich",
    "load",
]
