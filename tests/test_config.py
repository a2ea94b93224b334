"""
Tests for run configuration.
"""

from __future__ import annotations

from speedview.config import RunConfig
from speedview.services import MeasurementOptions


def test_verbose_implies_upload() -> None:
    config = RunConfig.from_flags(upload=False, verbose=True)
    assert config.measure_upload
    assert config.options() == MeasurementOptions(measure_upload=True, verbose=True)


def test_flags_default_to_download_only() -> None:
    config = RunConfig.from_flags()
    assert not config.measure_upload
    assert not config.verbose
    assert config.tick_interval == 0.05


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SPEEDVIEW_HOST", "speed.example")
    monkeypatch.setenv("SPEEDVIEW_TICK_INTERVAL", "0.1")
    monkeypatch.setenv("SPEEDVIEW_DEBUG", "1")
    config = RunConfig.from_flags(upload=True)
    assert config.host == "speed.example"
    assert config.tick_interval == 0.1
    assert config.debug


def test_explicit_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("SPEEDVIEW_HOST", "speed.example")
    config = RunConfig.from_flags(host="other.example", check_reachability=False)
    assert config.host == "other.example"
    assert not config.check_reachability
