"""Configuration schemas."""

from .app_schema import AppConfig, CatalogConfig, CliConfig, OutputFormat
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "CliConfig",
    "OutputFormat",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
    "LogLevel",
]
