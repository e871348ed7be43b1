"""Configuration package for the pattern catalog."""

from .schemas import (
    AppConfig,
    CatalogConfig,
    CliConfig,
    LogDestination,
    LogFileConfig,
    LoggingConfig,
    LogLevel,
    OutputFormat,
)
from .manager import ConfigurationManager

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "CliConfig",
    "ConfigurationManager",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
    "LogLevel",
    "OutputFormat",
]
