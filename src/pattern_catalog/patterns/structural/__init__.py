"""Structural pattern examples."""

from .delegation import NO_DELEGATE, DelegateExample, DelegateProtocol, RecordingDelegate
from .injection import (
    ConfigurableDataManager,
    DataExporter,
    DataManager,
    DataStorage,
    InjectionStrategy,
    InjectionTrace,
    InMemoryStorage,
    UserDefaultsStorage,
    assign_storage_dependency,
    call_with_dependency,
    construct_data_storage,
)

__all__ = [
    "NO_DELEGATE",
    "DelegateExample",
    "DelegateProtocol",
    "RecordingDelegate",
    "ConfigurableDataManager",
    "DataExporter",
    "DataManager",
    "DataStorage",
    "InjectionStrategy",
    "InjectionTrace",
    "InMemoryStorage",
    "UserDefaultsStorage",
    "assign_storage_dependency",
    "call_with_dependency",
    "construct_data_storage",
]
