"""Calculator defaults loading from YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from windtriangle.models import AircraftState

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


def resolve_config_dir(config_dir: Path | None = None) -> Path:
    """Config directory: explicit override, then WINDTRIANGLE_CONFIG_DIR, then repo config/."""
    if config_dir is not None:
        return config_dir
    env_dir = os.environ.get("WINDTRIANGLE_CONFIG_DIR")
    if env_dir:
        return Path(env_dir)
    return CONFIG_DIR


def load_defaults(config_dir: Path | None = None) -> AircraftState:
    """Load the initial calculator state from defaults.yaml.

    Falls back to the built-in defaults when the file does not exist. Fields
    missing from the file keep their built-in values.

    Args:
        config_dir: Override for config directory (testing).
    """
    defaults_file = resolve_config_dir(config_dir) / "defaults.yaml"
    if not defaults_file.exists():
        logger.info("No %s, using built-in defaults", defaults_file)
        return AircraftState()

    with open(defaults_file) as f:
        data = yaml.safe_load(f) or {}

    return AircraftState(**(data.get("defaults") or {}))
