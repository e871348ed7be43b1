"""Value objects describing catalog entries and their outputs."""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pattern_catalog.domain.core.exceptions import ValidationError

_NAME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9_-]*$')


class PatternCategory(str, Enum):
    """Classic GoF pattern families."""
    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"

    @classmethod
    def parse(cls, value: Any) -> "PatternCategory":
        """Resolve a category from an enum member or its (case-insensitive) value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise ValidationError(
            f"Invalid pattern category: {value}",
            details={"allowed": [member.value for member in cls]},
        )


class ExampleDescriptor(BaseModel):
    """
    Immutable description of one runnable pattern example.

    The ``run`` callable receives a console capture and an input mapping,
    writes any narration to the console and returns the structured result.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Unique catalog key")
    category: PatternCategory
    description: str = Field("", description="Short human readable summary")
    run: Callable[..., Any] = Field(..., exclude=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate pattern name format."""
        if not _NAME_PATTERN.match(v):
            raise ValueError(f"Invalid pattern name format: {v!r}")
        return v

    def summary(self) -> Dict[str, str]:
        """Serializable view without the callable."""
        return {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
        }


class ExampleOutput(BaseModel):
    """Captured result of running an example."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    text: str = ""
    value: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert output to a JSON friendly dictionary."""
        return {"text": self.text, "value": _to_primitive(self.value)}


def _to_primitive(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): _to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_primitive(v) for v in value]
    return value
