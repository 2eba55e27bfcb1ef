"""Configuration loading.

Threshold configuration is merged from three sources, first non-None wins:
1. Command-line flags
2. JSON config file (.lcovgaterc.json in the working directory)
3. Built-in defaults (100% for every kind, per-file off)

A missing, unreadable or invalid config file is treated as empty.
Runtime settings (coverage command, timeout, logging) come from
environment variables via pydantic-settings.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lcovgate.config.models import DEFAULT_THRESHOLD, GateSettings, ThresholdConfig
from lcovgate.core.errors import ConfigError
from lcovgate.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = ".lcovgaterc.json"

_DEFAULTS: dict[str, Any] = {
    "lines": DEFAULT_THRESHOLD,
    "functions": DEFAULT_THRESHOLD,
    "branches": DEFAULT_THRESHOLD,
    "per_file": False,
    "include": None,
    "exclude": None,
}


def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        reason = f"expected a JSON object, got {type(data).__name__}"
        raise ConfigError.parse_error(str(path), reason)
    return data


def _validation_error(e: ValidationError) -> ConfigError:
    err = e.errors()[0]
    field = ".".join(str(loc) for loc in err["loc"])
    return ConfigError.invalid_value(field, err.get("input"), err["msg"])


def load_file_config(path: Path) -> dict[str, Any]:
    """Load threshold values from a JSON config file.

    Returns only the keys the file sets, under their Python names
    (``perFile`` becomes ``per_file``). Any problem with the file yields
    an empty dict.
    """
    try:
        raw = _load_json(path)
        config = ThresholdConfig.model_validate(raw)
    except ConfigError as e:
        logger.warning("config_file_ignored", path=str(path), error=e.message)
        return {}
    except ValidationError as e:
        logger.warning("config_file_ignored", path=str(path), error=_validation_error(e).message)
        return {}

    values = config.model_dump(exclude_unset=True)
    logger.debug("config_file_loaded", path=str(path), keys=sorted(values))
    return values


def _coalesce(*values: Any) -> Any:
    return next((v for v in values if v is not None), None)


def merge_config(cli: Mapping[str, Any], file: Mapping[str, Any]) -> ThresholdConfig:
    """Merge flag values over file values over defaults.

    Pure: takes already-loaded mappings keyed by ThresholdConfig field
    names. A None value means "not given".

    Raises:
        ConfigError: If a merged value is invalid.
    """
    merged = {
        key: _coalesce(cli.get(key), file.get(key), default) for key, default in _DEFAULTS.items()
    }
    try:
        return ThresholdConfig.model_validate(merged)
    except ValidationError as e:
        raise _validation_error(e) from e


def load_threshold_config(cli: Mapping[str, Any], config_file: Path) -> ThresholdConfig:
    """Read the config file and merge it under the flag values."""
    return merge_config(cli, load_file_config(config_file))


def load_settings(**kwargs: Any) -> GateSettings:
    """Load runtime settings: defaults < env vars < kwargs.

    Raises:
        ConfigError: On invalid values.
    """
    try:
        return GateSettings(**kwargs)
    except ValidationError as e:
        raise _validation_error(e) from e
