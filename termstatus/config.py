"""Configuration loading for the termstatus demo command."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH = Path.home() / ".termstatus" / "config.yaml"

DEMO_DEFAULTS = {
    "total": 15,
    "delay": 0.3,
}

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """A config file parsed as YAML but holds values of the wrong shape."""


def load_config(
    path: Optional[Path] = None,
    required: bool = False,
    fallback: Optional[Dict[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    """Load the YAML config file (~/.termstatus/config.yaml by default).

    Args:
        path: Config file to read instead of CONFIG_PATH.
        required: If True, exit with error when config is missing or invalid.
        fallback: Default dict to return when config is missing and not required.

    Returns:
        Parsed config dict, fallback dict, or None if missing/invalid.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if required:
            logger.error("Config file not found at %s", config_path)
            sys.exit(1)
        return fallback

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.error("Error reading config: %s", e)
        if required:
            sys.exit(1)
        return fallback

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.error(
            "Error reading config: %s must hold a mapping, not %s",
            config_path, type(config).__name__,
        )
        if required:
            sys.exit(1)
        return fallback
    return config


def config_section(config: Optional[Dict[str, Any]], name: str) -> Dict[str, Any]:
    """Return config[name] as a dict; a missing or empty section is {}.

    Raises:
        ConfigError: if the section is present but not a mapping.
    """
    if not config:
        return {}
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping, not {type(section).__name__}")
    return section


def demo_settings(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge the config's 'demo' section over DEMO_DEFAULTS.

    Raises:
        ConfigError: on a malformed section or a non-numeric value.
    """
    section = config_section(config, "demo")
    settings = dict(DEMO_DEFAULTS)
    for key in DEMO_DEFAULTS:
        if section.get(key) is not None:
            settings[key] = section[key]

    for key, convert in (("total", int), ("delay", float)):
        try:
            settings[key] = convert(settings[key])
        except (TypeError, ValueError):
            raise ConfigError(
                f"demo.{key} must be a number, got {settings[key]!r}"
            ) from None
    return settings
