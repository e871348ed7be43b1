"""Main application configuration schema."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig


class OutputFormat(str, Enum):
    """CLI output formats."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class CatalogConfig(BaseModel):
    """Catalog population settings."""

    enabled_patterns: Optional[List[str]] = Field(
        None, description="Built-in patterns to register; None registers all"
    )

    @field_validator('enabled_patterns')
    @classmethod
    def validate_enabled_patterns(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Reject duplicate entries."""
        if v is not None and len(set(v)) != len(v):
            raise ValueError("enabled_patterns must not contain duplicates")
        return v


class CliConfig(BaseModel):
    """Command line presentation settings."""

    output_format: OutputFormat = Field(OutputFormat.JSON, description="Default output format")


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    cli: CliConfig = Field(default_factory=CliConfig)
