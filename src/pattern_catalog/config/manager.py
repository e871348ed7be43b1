"""Configuration management for the pattern catalog."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config.schemas import AppConfig, CatalogConfig, CliConfig, LoggingConfig
from pattern_catalog.config.utils.env_expansion import expand_config_env_vars
from pattern_catalog.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERN_CATALOG_"

# Environment variable suffix -> path inside the configuration document
ENV_OVERRIDES: Dict[str, Tuple[str, ...]] = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FILE": ("logging", "file", "path"),
    "OUTPUT_FORMAT": ("cli", "output_format"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is resolved lazily from, in increasing precedence:
    - schema defaults
    - an optional JSON configuration file (with environment expansion)
    - ``PATTERN_CATALOG_*`` environment overrides
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
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

    def _load_app_config(self) -> AppConfig:
        data: Dict[str, Any] = {}
        if self._config_file:
            data = self._read_config_file(Path(self._config_file))
        data = expand_config_env_vars(data)
        self._apply_env_overrides(data)

        try:
            config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(fields)}", missing_fields=fields
            ) from e

        logger.debug("Loaded configuration from %s", self._config_file or "defaults")
        return config

    @staticmethod
    def _read_config_file(path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any]) -> None:
        for suffix, path in ENV_OVERRIDES.items():
            value = os.environ.get(ENV_PREFIX + suffix)
            if value is None:
                continue
            section = data
            for key in path[:-1]:
                section = section.setdefault(key, {})
                if not isinstance(section, dict):
                    raise ConfigurationError(
                        f"Cannot apply {ENV_PREFIX}{suffix}: '{key}' section must be an object",
                        missing_fields=[".".join(path)],
                    )
            section[path[-1]] = value
            logger.debug("Applied environment override %s%s", ENV_PREFIX, suffix)

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_catalog_config(self) -> CatalogConfig:
        """Get catalog configuration."""
        return self.app_config.catalog

    def get_cli_config(self) -> CliConfig:
        """Get CLI configuration."""
        return self.app_config.cli

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
