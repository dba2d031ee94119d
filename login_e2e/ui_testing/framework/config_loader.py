"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Single YAML file for the whole suite (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Default value support

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (repository root / config / config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"

TRUTHY = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Process-wide view of config/config.yaml with environment overrides.

    Usage:
        >>> ConfigLoader().get("ui.expect_timeout", 5000)
        5000
        >>> ConfigLoader.env_key("ui.login.email_label")
        'UI_LOGIN_EMAIL_LABEL'
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Return the process-wide instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    @staticmethod
    def env_key(key: str) -> str:
        """Environment variable that overrides `key` (ui.base_url -> UI_BASE_URL)."""
        return key.upper().replace(".", "_")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Environment variable first, then the YAML file, then `default`.
        Environment strings are coerced to the type of `default`.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Value used when neither source defines `key`
        """
        env_value = os.environ.get(self.env_key(key))
        if env_value is not None:
            return _coerce(env_value, default)

        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Used by tests that load a different configuration file.
        """
        cls._instance = None
        cls._config = {}


def _coerce(value: str, reference: Any) -> Any:
    """Convert an environment string to the type of `reference`, if possible."""
    if isinstance(reference, bool):
        return value.strip().lower() in TRUTHY
    for kind in (int, float):
        if isinstance(reference, kind):
            try:
                return kind(value)
            except ValueError:
                return value
    return value


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
]
