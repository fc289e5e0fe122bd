"""Tests for the region catalog and parent-unit enrichment."""

from __future__ import annotations

import threading

import pytest

from sigungu_geocoder.data import catalog
from sigungu_geocoder.data.boundaries import SIGUNGU_BOUNDARIES
from sigungu_geocoder.data.catalog import (
    UNKNOWN_PARENT_NAME,
    RegionCatalog,
    RegionIdentity,
    enrich,
)
from sigungu_geocoder.data.geometry import MultiPolygon, Polygon, polygon

TRIANGLE = polygon((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))


def test_load_is_memoized() -> None:
    assert catalog.load() is catalog.load()
    assert len(catalog.load()) == len(SIGUNGU_BOUNDARIES)


def test_load_builds_once_under_concurrent_callers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(catalog, "_catalog", None)
    results = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        results.append(catalog.load())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_embedded_catalog_invariants() -> None:
    codes = [region.identity.code for region in catalog.load()]
    assert len(codes) == len(set(codes))
    assert all(len(code) >= 2 for code in codes)


def test_embedded_rings_have_at_least_three_points() -> None:
    for code, _, geometry in SIGUNGU_BOUNDARIES:
        parts = geometry.parts if isinstance(geometry, MultiPolygon) else (geometry,)
        assert parts, code
        for part in parts:
            assert isinstance(part, Polygon), code
            assert len(part.ring) >= 3, code


def test_catalog_preserves_source_order() -> None:
    codes = [region.identity.code for region in catalog.load()]
    assert codes == [code for code, _, _ in SIGUNGU_BOUNDARIES]


@pytest.mark.parametrize(
    "code, name, parent_code, parent_name",
    [
        ("11140", "중구", "11", "서울특별시"),
        ("26350", "해운대구", "26", "부산광역시"),
        ("41117", "수원시 영통구", "41", "경기도"),
        ("50110", "제주시", "50", "제주특별자치도"),
    ],
)
def test_enrich_resolves_parent_unit(code: str, name: str, parent_code: str, parent_name: str) -> None:
    enriched = enrich(RegionIdentity(code, name))
    assert enriched.code == code
    assert enriched.name == name
    assert enriched.parent_code == parent_code
    assert enriched.parent_name == parent_name
    assert enriched.full_name == f"{parent_name} {name}"


def test_enrich_unknown_prefix_uses_sentinel() -> None:
    enriched = enrich(RegionIdentity("99001", "어딘가"))
    assert enriched.parent_code == "99"
    assert enriched.parent_name == UNKNOWN_PARENT_NAME


def test_from_source_rejects_duplicate_codes() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        RegionCatalog.from_source([("11110", "가", TRIANGLE), ("11110", "나", TRIANGLE)])


def test_from_source_rejects_short_codes() -> None:
    with pytest.raises(ValueError, match="too short"):
        RegionCatalog.from_source([("1", "가", TRIANGLE)])
