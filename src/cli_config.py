"""Configuration file loading and CLI precedence for gradlejava.

Precedence, highest first: CLI flags, environment variables, the YAML
config file, then the defaults in ``Constants``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from gradle_wrapper.command import default_gradlew_file

logger = logging.getLogger(__name__)

KNOWN_KEYS = ("local_dir", "log_level", "wrapper", "available_java")


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML configuration file.

    Args:
        config_path: Path to the YAML file, or None for no file.

    Returns:
        Mapping of recognised keys; unknown keys are dropped with a warning.

    Raises:
        ConfigError: If the file is missing, unparseable or not a mapping.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")

    config: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            logger.warning("Ignoring unknown config key '%s'", key)
            continue
        config[key] = value

    available = config.get("available_java")
    if available is not None:
        if isinstance(available, (str, int, float)):
            available = [available]
        if not isinstance(available, list):
            raise ConfigError("available_java must be a list of versions")
        config["available_java"] = [str(v) for v in available]
    return config


def apply_config(args, config: Dict[str, Any]) -> None:
    """Fill CLI arguments left unset from env and config values."""
    if not getattr(args, "LOG_LEVEL", None):
        env_level = os.environ.get(Constants.ENV_LOG_LEVEL)
        level = env_level or config.get("log_level")
        args.LOG_LEVEL = str(level).upper() if level else None

    if not getattr(args, "LOCAL_DIR", None) and not os.environ.get(Constants.ENV_LOCAL_DIR):
        if config.get("local_dir"):
            args.LOCAL_DIR = str(config["local_dir"])

    if not getattr(args, "WRAPPER", None):
        args.WRAPPER = str(config.get("wrapper") or default_gradlew_file())

    if not getattr(args, "AVAILABLE_JAVA", None):
        args.AVAILABLE_JAVA = list(config.get("available_java") or [])
