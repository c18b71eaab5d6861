"""Tests for runtime settings."""
import pytest

from celestialexplorer import config


def test_defaults_are_valid():
    config.validate_settings()


def test_rejects_non_positive_tick(monkeypatch):
    monkeypatch.setattr(config, "TICK_INTERVAL_MS", 0)
    with pytest.raises(ValueError):
        config.validate_settings()


def test_rejects_bad_radius(monkeypatch):
    monkeypatch.setattr(config, "MOON_ORBIT_RADIUS", -1.0)
    with pytest.raises(ValueError):
        config.validate_settings()


def test_rejects_epoch_time_out_of_range(monkeypatch):
    monkeypatch.setattr(config, "EPOCH_TIME", 24.0)
    with pytest.raises(ValueError):
        config.validate_settings()


def test_mobile_minimap_arms_are_smaller():
    assert config.MOBILE_MINIMAP_EARTH_ARM_PX < config.MINIMAP_EARTH_ARM_PX
    assert config.MOBILE_MINIMAP_MOON_ARM_PX < config.MINIMAP_MOON_ARM_PX


def test_rejects_zero_minimap_arm(monkeypatch):
    monkeypatch.setattr(config, "MOBILE_MINIMAP_MOON_ARM_PX", 0)
    with pytest.raises(ValueError):
        config.validate_settings()
