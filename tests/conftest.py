"""Shared test fixtures."""

from __future__ import annotations

import pytest

from windtriangle.models import AircraftState


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):
    """Ignore any WINDTRIANGLE_CONFIG_DIR set in the developer's environment."""
    monkeypatch.delenv("WINDTRIANGLE_CONFIG_DIR", raising=False)


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Temporary config directory with a defaults.yaml matching the built-in defaults."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "defaults.yaml").write_text(
        "defaults:\n"
        "  ground_speed_kt: 458\n"
        "  true_heading_deg: 97.7\n"
        "  wind_speed_kt: 23\n"
        "  wind_direction_deg: 247\n"
    )
    return config_dir


@pytest.fixture
def default_state():
    """The calculator's initial state."""
    return AircraftState(
        ground_speed_kt=458,
        true_heading_deg=97.7,
        wind_speed_kt=23,
        wind_direction_deg=247,
    )
