"""Optional YAML config file with defaults for the generate command."""

import logging
from pathlib import Path
from typing import Optional

import yaml

from md2epub.errors import ConfigError
from md2epub.models import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".md2epub.yaml"

CONFIG_KEYS = ("author", "language")


def load_config(path: Optional[str] = None) -> Config:
    """Load defaults from *path*, or from ~/.md2epub.yaml if it exists.

    An explicit path must exist; the default one is optional.

    Raises:
        ConfigError: If the file is missing (explicit path only), unreadable
            or not a mapping of string values.
    """
    if path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.is_file():
            logger.debug("No config file at %s, using defaults", config_path)
            return Config()
    else:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"config file {config_path} does not exist")

    logger.debug("Loading configuration from %s", config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"failed to load config file {config_path}: {e}") from e

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"config file {config_path} must contain a mapping")

    values = {}
    for key in CONFIG_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"config key '{key}' must be a string")
        values[key] = value

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(map(str, unknown)))

    return Config(**values)
