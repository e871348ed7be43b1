"""Catalog domain package."""

from .value_objects import ExampleDescriptor, ExampleOutput, PatternCategory

__all__ = ["ExampleDescriptor", "ExampleOutput", "PatternCategory"]
