"""Catalog bootstrap - populates a catalog with the built-in examples."""
from typing import Optional

from pattern_catalog.application.catalog import PatternCatalog
from pattern_catalog.config.schemas import CatalogConfig
from pattern_catalog.domain.core.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.patterns import builtin_descriptors

logger = get_logger(__name__)


def build_default_catalog(config: Optional[CatalogConfig] = None) -> PatternCatalog:
    """
    Create a catalog holding the built-in examples.

    Args:
        config: Optional catalog configuration restricting which examples
                are registered.

    Raises:
        ConfigurationError: If ``enabled_patterns`` names an unknown example
    """
    config = config or CatalogConfig()
    descriptors = builtin_descriptors()

    if config.enabled_patterns is not None:
        known = {descriptor.name for descriptor in descriptors}
        unknown = [name for name in config.enabled_patterns if name not in known]
        if unknown:
            raise ConfigurationError(
                f"Unknown patterns in enabled_patterns: {', '.join(unknown)}",
                missing_fields=unknown,
            )
        enabled = set(config.enabled_patterns)
        descriptors = [d for d in descriptors if d.name in enabled]

    catalog = PatternCatalog()
    for descriptor in descriptors:
        catalog.register(descriptor)

    logger.debug(f"Catalog ready with {len(catalog)} patterns")
    return catalog
