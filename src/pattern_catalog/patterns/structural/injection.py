"""Dependency injection: initializer, property and method injection of a storage.

Each strategy function wires a ``DataStorage`` into a consumer, performs a
save/load round trip and returns an ``InjectionTrace`` describing what
happened.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.domain.core.exceptions import ValidationError


class InjectionStrategy(str, Enum):
    """When and how a dependency is supplied."""
    INITIALIZER = "initializer"
    PROPERTY = "property"
    METHOD = "method"


class InjectionTrace(BaseModel):
    """What a strategy did, for inspection."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    strategy: InjectionStrategy
    storage: str
    trace: List[str] = Field(default_factory=list)
    result: Optional[Any] = None


class DataStorage(ABC):
    """Capability set of a key/value storage."""

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def load(self, key: str) -> Any:
        pass


class InMemoryStorage(DataStorage):
    """Plain dictionary backed storage."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def save(self, key: str, value: Any) -> None:
        self._data[key] = value

    def load(self, key: str) -> Any:
        return self._data.get(key)


class UserDefaultsStorage(DataStorage):
    """Preference-style storage that namespaces every key."""

    def __init__(self, suite: str = "standard"):
        self.suite = suite
        self._defaults: Dict[str, Any] = {}

    def _key(self, key: str) -> str:
        return f"{self.suite}.{key}"

    def save(self, key: str, value: Any) -> None:
        self._defaults[self._key(key)] = value

    def load(self, key: str) -> Any:
        return self._defaults.get(self._key(key))


class _TracingStorage(DataStorage):
    """Records every call before forwarding it to the wrapped storage."""

    def __init__(self, wrapped: DataStorage, trace: List[str]):
        self.wrapped = wrapped
        self.trace = trace

    def save(self, key: str, value: Any) -> None:
        self.trace.append(f"save {key}={value!r} via {type(self.wrapped).__name__}")
        self.wrapped.save(key, value)

    def load(self, key: str) -> Any:
        value = self.wrapped.load(key)
        self.trace.append(f"load {key} -> {value!r} via {type(self.wrapped).__name__}")
        return value


class DataManager:
    """Receives its storage once, at construction, and keeps it for life."""

    def __init__(self, storage: DataStorage):
        self._storage = storage

    @property
    def storage(self) -> DataStorage:
        return self._storage

    def save(self, key: str, value: Any) -> None:
        self._storage.save(key, value)

    def load(self, key: str) -> Any:
        return self._storage.load(key)


class ConfigurableDataManager:
    """
    Exposes its storage as an assignable attribute.

    Swapping ``storage`` while data is in flight leaves earlier writes in the
    old storage; nothing here guards against it, callers must coordinate.
    """

    def __init__(self):
        self.storage: Optional[DataStorage] = None

    def save(self, key: str, value: Any) -> None:
        if self.storage is None:
            raise ValidationError("No storage assigned to ConfigurableDataManager")
        self.storage.save(key, value)

    def load(self, key: str) -> Any:
        if self.storage is None:
            raise ValidationError("No storage assigned to ConfigurableDataManager")
        return self.storage.load(key)


class DataExporter:
    """Gets the storage as an argument on every call."""

    def __init__(self, key: str = "export", value: Any = "snapshot"):
        self.key = key
        self.value = value

    def export(self, storage: DataStorage) -> Any:
        storage.save(self.key, self.value)
        return storage.load(self.key)


def _require_storage(dependency: Any) -> DataStorage:
    if not isinstance(dependency, DataStorage):
        raise ValidationError(
            f"{type(dependency).__name__} does not implement DataStorage"
        )
    return dependency


def construct_data_storage(dependency: DataStorage,
                           key: str = "greeting",
                           value: Any = "hello") -> InjectionTrace:
    """Initializer injection: the dependency is fixed at construction."""
    _require_storage(dependency)
    trace: List[str] = [f"construct DataManager with {type(dependency).__name__}"]
    manager = DataManager(_TracingStorage(dependency, trace))
    manager.save(key, value)
    result = manager.load(key)
    return InjectionTrace(
        strategy=InjectionStrategy.INITIALIZER,
        storage=type(dependency).__name__,
        trace=trace,
        result=result,
    )


def assign_storage_dependency(storage: ConfigurableDataManager,
                              dependency: DataStorage,
                              key: str = "greeting",
                              value: Any = "hello") -> InjectionTrace:
    """Property injection: the dependency replaces whatever was assigned before."""
    _require_storage(dependency)
    trace: List[str] = []
    previous = storage.storage
    if previous is None:
        trace.append(f"assign {type(dependency).__name__}")
    else:
        trace.append(f"replace {type(previous).__name__} with {type(dependency).__name__}")
    # Trace only the round trip; the manager ends up holding the caller's storage
    storage.storage = _TracingStorage(dependency, trace)
    try:
        if value is not None:
            storage.save(key, value)
        result = storage.load(key)
    finally:
        storage.storage = dependency
    return InjectionTrace(
        strategy=InjectionStrategy.PROPERTY,
        storage=type(dependency).__name__,
        trace=trace,
        result=result,
    )


def call_with_dependency(method: Callable[[DataStorage], Any],
                         dependency: DataStorage) -> InjectionTrace:
    """Method injection: the dependency only lives for one call."""
    _require_storage(dependency)
    if not callable(method):
        raise ValidationError(f"{method!r} is not callable")
    name = getattr(method, "__qualname__", type(method).__name__)
    trace: List[str] = [f"call {name} with {type(dependency).__name__}"]
    result = method(_TracingStorage(dependency, trace))
    return InjectionTrace(
        strategy=InjectionStrategy.METHOD,
        storage=type(dependency).__name__,
        trace=trace,
        result=result,
    )


STORAGES: Dict[str, Callable[[], DataStorage]] = {
    "memory": InMemoryStorage,
    "user_defaults": UserDefaultsStorage,
}


def _make_storage(kind: str) -> DataStorage:
    try:
        return STORAGES[kind]()
    except KeyError:
        raise ValidationError(
            f"Unknown storage kind: {kind}", details={"allowed": sorted(STORAGES)}
        ) from None


def run(console, options: Optional[Mapping[str, Any]] = None) -> List[InjectionTrace]:
    """Exercise the three strategies, then show the property-swap hazard."""
    kind = (options or {}).get("storage", "memory")
    traces = [
        construct_data_storage(_make_storage(kind)),
        call_with_dependency(DataExporter().export, _make_storage(kind)),
    ]

    manager = ConfigurableDataManager()
    traces.append(assign_storage_dependency(manager, _make_storage(kind)))
    # New storage does not see what the previous one saved
    traces.append(assign_storage_dependency(manager, UserDefaultsStorage(), value=None))

    for item in traces:
        console.print(f"[{item.strategy.value}] {item.storage}: {item.result!r}")
        for line in item.trace:
            console.print(f"  {line}")
    return traces
