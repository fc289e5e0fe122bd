from __future__ import annotations

import pytest

from sigungu_geocoder.config import Settings, _as_bool
from sigungu_geocoder.pipeline.distance import DistanceUnit


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SIGUNGU_LOG_LEVEL", "SIGUNGU_DISTANCE_UNIT", "SIGUNGU_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.load()
    assert settings.log_level == "WARNING"
    assert settings.distance_unit is DistanceUnit.KILOMETERS
    assert settings.json_output is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIGUNGU_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SIGUNGU_DISTANCE_UNIT", " Mile ")
    monkeypatch.setenv("SIGUNGU_JSON_OUTPUT", "yes")

    settings = Settings.load()
    assert settings.log_level == "DEBUG"
    assert settings.distance_unit is DistanceUnit.MILES
    assert settings.json_output is True


def test_settings_rejects_unknown_unit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIGUNGU_DISTANCE_UNIT", "parsec")
    with pytest.raises(ValueError, match="SIGUNGU_DISTANCE_UNIT"):
        Settings.load()


@pytest.mark.parametrize(
    "text, default, expected",
    [("1", False, True), ("On", False, True), ("no", True, False), ("maybe", True, True), ("", False, False)],
)
def test_as_bool(text: str, default: bool, expected: bool) -> None:
    assert _as_bool(text, default=default) is expected
