"""Minimal configuration loader for the 시군구 geocoder."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from sigungu_geocoder.pipeline.distance import DistanceUnit

load_dotenv()


def _as_bool(value: str, *, default: bool = False) -> bool:
    truthy = {"1", "true", "yes", "on"}
    falsy = {"0", "false", "no", "off"}
    text = value.strip().lower()
    if text in truthy:
        return True
    if text in falsy:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    distance_unit: DistanceUnit
    json_output: bool

    @classmethod
    def load(cls) -> "Settings":
        unit = os.getenv("SIGUNGU_DISTANCE_UNIT", DistanceUnit.KILOMETERS.value).strip().lower()
        try:
            distance_unit = DistanceUnit(unit)
        except ValueError:
            choices = ", ".join(u.value for u in DistanceUnit)
            raise ValueError(f"SIGUNGU_DISTANCE_UNIT must be one of {choices}, got {unit!r}") from None

        return cls(
            log_level=os.getenv("SIGUNGU_LOG_LEVEL", "WARNING"),
            distance_unit=distance_unit,
            json_output=_as_bool(os.getenv("SIGUNGU_JSON_OUTPUT", "false"), default=False),
        )
