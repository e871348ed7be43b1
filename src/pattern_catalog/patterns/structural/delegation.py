"""Delegation pattern: a subject hands work to an optional, non-owned delegate."""
from __future__ import annotations

import gc
import weakref
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from pattern_catalog.domain.core.exceptions import ValidationError


class _NoDelegate:
    """Sentinel returned when dispatch finds no bound delegate."""
    _instance: Optional["_NoDelegate"] = None

    def __new__(cls) -> "_NoDelegate":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DELEGATE"

    def __bool__(self) -> bool:
        return False


NO_DELEGATE = _NoDelegate()


class DelegateProtocol(ABC):
    """Capability set a delegate must implement."""

    @abstractmethod
    def method_one(self) -> Any:
        pass

    @abstractmethod
    def method_two(self) -> Any:
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        # Any class providing both methods counts as a delegate
        if cls is DelegateProtocol:
            if all(callable(getattr(subclass, name, None)) for name in ("method_one", "method_two")):
                return True
        return NotImplemented


class DelegateExample:
    """
    Subject holding at most one weak reference to its delegate.

    The subject never keeps the delegate alive: once the delegate is
    garbage collected, dispatch falls back to ``NO_DELEGATE``.
    """

    def __init__(self, delegate: Optional[DelegateProtocol] = None):
        self._delegate_ref: Optional[weakref.ReferenceType] = None
        if delegate is not None:
            self.set_delegate(delegate)

    @property
    def delegate(self) -> Optional[DelegateProtocol]:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    def set_delegate(self, delegate: Optional[DelegateProtocol]) -> None:
        """Replace the current binding; ``None`` clears it."""
        if delegate is None:
            self._delegate_ref = None
            return
        if not isinstance(delegate, DelegateProtocol):
            raise ValidationError(
                f"{type(delegate).__name__} does not implement DelegateProtocol"
            )
        try:
            self._delegate_ref = weakref.ref(delegate)
        except TypeError as e:
            raise ValidationError(
                f"{type(delegate).__name__} cannot be weakly referenced"
            ) from e

    def invoke_one(self) -> Any:
        delegate = self.delegate
        if delegate is None:
            return NO_DELEGATE
        return delegate.method_one()

    def invoke_two(self) -> Any:
        delegate = self.delegate
        if delegate is None:
            return NO_DELEGATE
        return delegate.method_two()


class RecordingDelegate(DelegateProtocol):
    """Delegate used by the demo; records every call it receives."""

    def __init__(self, label: str = "delegate"):
        self.label = label
        self.calls: List[str] = []

    def method_one(self) -> str:
        self.calls.append("method_one")
        return f"{self.label}.method_one"

    def method_two(self) -> str:
        self.calls.append("method_two")
        return f"{self.label}.method_two"


def _describe(result: Any) -> str:
    return repr(result) if result is NO_DELEGATE else str(result)


def run(console, options: Optional[Mapping[str, Any]] = None) -> dict:
    """Dispatch through a subject before binding, while bound, and after release."""
    label = (options or {}).get("label", "delegate")
    subject = DelegateExample()
    results = {}

    results["unbound"] = [_describe(subject.invoke_one()), _describe(subject.invoke_two())]
    console.print(f"Without delegate: {', '.join(results['unbound'])}")

    delegate = RecordingDelegate(label)
    subject.set_delegate(delegate)
    results["bound"] = [_describe(subject.invoke_one()), _describe(subject.invoke_two())]
    console.print(f"With delegate: {', '.join(results['bound'])}")

    del delegate
    gc.collect()
    results["released"] = [_describe(subject.invoke_one()), _describe(subject.invoke_two())]
    console.print(f"After delegate released: {', '.join(results['released'])}")
    return results
