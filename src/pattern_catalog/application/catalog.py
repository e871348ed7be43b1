"""Pattern catalog - registry of runnable pattern examples."""
import threading
from typing import Dict, Iterator, List, Optional, Tuple, Union

from pattern_catalog.domain.catalog.value_objects import ExampleDescriptor, PatternCategory
from pattern_catalog.domain.core.exceptions import (
    PatternNotFoundError,
    RegistrationConflictError,
)
from pattern_catalog.infrastructure.logging.logger import get_logger

CategoryFilter = Optional[Union[PatternCategory, str]]


class CatalogView:
    """
    Lazy, restartable view over catalog descriptors.

    Each iteration takes a fresh snapshot of the catalog, so a view can be
    iterated any number of times and always reflects registration order.
    """

    def __init__(self, catalog: "PatternCatalog", category: Optional[PatternCategory] = None):
        self._catalog = catalog
        self._category = category

    def __iter__(self) -> Iterator[ExampleDescriptor]:
        for descriptor in self._catalog._snapshot():
            if self._category is None or descriptor.category is self._category:
                yield descriptor

    def __repr__(self) -> str:
        category = self._category.value if self._category else "all"
        return f"CatalogView(category='{category}')"


class PatternCatalog:
    """
    In-memory registry mapping pattern names to example descriptors.

    Registration is serialized with a lock and expected to happen once at
    startup; lookups and listing only read and are safe for concurrent
    callers afterwards.
    """

    def __init__(self):
        self._registrations: Dict[str, ExampleDescriptor] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, descriptor: ExampleDescriptor) -> None:
        """
        Register a pattern example.

        Args:
            descriptor: Descriptor of the example to add

        Raises:
            RegistrationConflictError: If the name is already registered
        """
        with self._registry_lock:
            if descriptor.name in self._registrations:
                self.logger.warning(f"Rejected duplicate registration: {descriptor.name}")
                raise RegistrationConflictError(descriptor.name)
            self._registrations[descriptor.name] = descriptor

        self.logger.info(f"Registered pattern: {descriptor.name}")

    def lookup(self, name: str) -> ExampleDescriptor:
        """
        Get the descriptor registered under ``name``.

        Raises:
            PatternNotFoundError: If no pattern has that name
        """
        try:
            descriptor = self._registrations[name]
        except KeyError:
            raise PatternNotFoundError(name) from None
        self.logger.debug(f"Looked up pattern: {name}")
        return descriptor

    def list(self, category: CategoryFilter = None) -> CatalogView:
        """
        List descriptors in registration order.

        Args:
            category: Optional category (enum member or its name) to filter by

        Raises:
            ValidationError: If ``category`` is not a known category
        """
        parsed = PatternCategory.parse(category) if category is not None else None
        return CatalogView(self, parsed)

    def names(self) -> List[str]:
        return [descriptor.name for descriptor in self._snapshot()]

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def clear(self) -> None:
        """Remove all registrations."""
        with self._registry_lock:
            self._registrations.clear()
        self.logger.debug("Cleared pattern catalog")

    def _snapshot(self) -> Tuple[ExampleDescriptor, ...]:
        with self._registry_lock:
            return tuple(self._registrations.values())

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)
