"""Config module exports."""

from lcovgate.config.loader import (
    DEFAULT_CONFIG_FILE,
    load_file_config,
    load_settings,
    load_threshold_config,
    merge_config,
)
from lcovgate.config.models import GateSettings, ThresholdConfig

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "GateSettings",
    "ThresholdConfig",
    "load_file_config",
    "load_settings",
    "load_threshold_config",
    "merge_config",
]
