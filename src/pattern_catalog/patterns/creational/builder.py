"""Builder pattern: assembling a hamburger step by step.

A ``HamburgerBuilder`` collects toppings through setters while it is
``CONFIGURING``. ``build()`` materializes an immutable ``Hamburger`` and
moves the builder to ``BUILT``; from then on only ``build()`` is allowed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.domain.core.exceptions import InvalidStateError, ValidationError


class BuilderState(str, Enum):
    """Lifecycle of a builder."""
    CONFIGURING = "CONFIGURING"
    BUILT = "BUILT"


class Hamburger(BaseModel):
    """Immutable product produced by a builder."""
    model_config = ConfigDict(frozen=True)

    name: str = "Hamburger"
    patties: int = Field(1, ge=0)
    bacon: bool = False
    cheese: bool = False
    pickles: bool = True
    mustard: bool = True
    tomato: bool = False

    def toppings(self) -> list:
        """Names of the enabled boolean toppings in menu order."""
        return [
            topping for topping in ("bacon", "cheese", "pickles", "mustard", "tomato")
            if getattr(self, topping)
        ]


class BurgerBuilder(ABC):
    """Capability set every burger builder provides."""

    @abstractmethod
    def set_name(self, name: str) -> "BurgerBuilder":
        pass

    @abstractmethod
    def set_patties(self, patties: int) -> "BurgerBuilder":
        pass

    @abstractmethod
    def set_bacon(self, bacon: bool) -> "BurgerBuilder":
        pass

    @abstractmethod
    def set_cheese(self, cheese: bool) -> "BurgerBuilder":
        pass

    @abstractmethod
    def set_pickles(self, pickles: bool) -> "BurgerBuilder":
        pass

    @abstractmethod
    def set_mustard(self, mustard: bool) -> "BurgerBuilder":
        pass

    @abstractmethod
    def set_tomato(self, tomato: bool) -> "BurgerBuilder":
        pass

    @abstractmethod
    def build(self) -> Hamburger:
        pass


class HamburgerBuilder(BurgerBuilder):
    """
    Builder for a classic hamburger.

    Not safe for concurrent setters; each caller should own its builder.
    """

    DEFAULTS: Dict[str, Any] = {
        "name": "Hamburger",
        "patties": 1,
        "bacon": False,
        "cheese": False,
        "pickles": True,
        "mustard": True,
        "tomato": False,
    }

    def __init__(self):
        self._config: Dict[str, Any] = dict(self.DEFAULTS)
        self._state = BuilderState.CONFIGURING
        self._product: Optional[Hamburger] = None

    @property
    def state(self) -> BuilderState:
        return self._state

    def _set(self, field: str, value: Any,
             validator: Optional[Callable[[str, Any], Any]] = None) -> "HamburgerBuilder":
        if self._state is not BuilderState.CONFIGURING:
            raise InvalidStateError(self._state.value, f"set_{field}")
        if validator is not None:
            value = validator(field, value)
        self._config[field] = value
        return self

    def set_name(self, name: str) -> "HamburgerBuilder":
        return self._set("name", name, _require_name)

    def set_patties(self, patties: int) -> "HamburgerBuilder":
        return self._set("patties", patties, _require_count)

    def set_bacon(self, bacon: bool) -> "HamburgerBuilder":
        return self._set("bacon", bacon, _require_bool)

    def set_cheese(self, cheese: bool) -> "HamburgerBuilder":
        return self._set("cheese", cheese, _require_bool)

    def set_pickles(self, pickles: bool) -> "HamburgerBuilder":
        return self._set("pickles", pickles, _require_bool)

    def set_mustard(self, mustard: bool) -> "HamburgerBuilder":
        return self._set("mustard", mustard, _require_bool)

    def set_tomato(self, tomato: bool) -> "HamburgerBuilder":
        return self._set("tomato", tomato, _require_bool)

    def build(self) -> Hamburger:
        """Materialize the product; repeated calls return an equal product."""
        if self._product is None:
            self._product = Hamburger(**self._config)
            self._state = BuilderState.BUILT
        return self._product

    def apply(self, options: Mapping[str, Any]) -> "HamburgerBuilder":
        """Call the setter matching each key of ``options``."""
        unknown = sorted(set(options) - set(self.DEFAULTS))
        if unknown:
            raise ValidationError(
                f"Unknown burger options: {', '.join(unknown)}",
                details={"allowed": sorted(self.DEFAULTS)},
            )
        for field in self.DEFAULTS:
            if field in options:
                setter: Callable[[Any], HamburgerBuilder] = getattr(self, f"set_{field}")
                setter(options[field])
        return self


def _require_name(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Burger name must be a non-empty string", details={field: value})
    return value


def _require_count(field: str, value: Any) -> int:
    # bool is an int subclass, but True patties makes no sense
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(
            "Number of patties must be a non-negative integer",
            details={field: value},
        )
    return value


def _require_bool(field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"'{field}' must be a boolean", details={field: value})
    return value


def run(console, options: Optional[Mapping[str, Any]] = None) -> Hamburger:
    """Assemble a hamburger from ``options`` and describe it."""
    builder = HamburgerBuilder().apply(options or {})
    burger = builder.build()

    console.print(f"Building a {burger.name} with {burger.patties} patties")
    toppings = burger.toppings()
    console.print(f"Toppings: {', '.join(toppings) if toppings else 'none'}")
    return burger
