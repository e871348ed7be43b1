"""Application layer: the catalog and the runner."""

from .catalog import CatalogView, PatternCatalog
from .runner import ConsoleCapture, ExampleRunner

__all__ = ["CatalogView", "PatternCatalog", "ConsoleCapture", "ExampleRunner"]
