"""Configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERN_CATALOG_"

# environment variable suffix -> (section, key)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FILE": ("logging", "file_path"),
    "ID_START": ("repository", "id_start"),
}


def expand_env_vars(value: Any) -> Any:
    """
    Expand ``$VAR`` and ``${VAR}`` references in configuration values.

    Dictionaries and lists are expanded recursively; unknown variables are
    left untouched and non-string values are returned unchanged.
    """
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


class ConfigurationManager:
    """
    Loads and validates the application configuration.

    Sources, lowest priority first:
    - schema defaults
    - optional JSON configuration file
    - ``PATTERN_CATALOG_*`` environment variables

    The configuration is loaded lazily on first access and cached.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._load_config_file(self._config_file)

        config_data = expand_env_vars(config_data)
        config_data = self._apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a JSON file."""
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object"
            )
        return data

    def _apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        result = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in config_data.items()}
        for suffix, (section, key) in ENV_OVERRIDES.items():
            env_value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if env_value is None:
                continue
            section_data = result.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be an object")
            section_data[key] = env_value
        return result
