"""Hydrators converting raw API payloads into domain objects."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from entity.errors import ConfigurationError


class Hydratable(Protocol):
    """Object that can populate itself from a response mapping."""

    def populate(self, data: Mapping[str, Any]) -> None:  # pragma: no cover - protocol stub
        ...


T = TypeVar("T", bound=Hydratable)


class HydratorInterface(ABC):
    """Abstract base class for payload hydrators."""

    @abstractmethod
    def hydrate(self, data: Mapping[str, Any]) -> Any:
        """Return a new domain object built from ``data``."""

    @abstractmethod
    def hydrate_object(self, data: Mapping[str, Any], obj: T) -> T:
        """Populate an existing domain object from ``data``."""


class ArrayHydrator(HydratorInterface):
    """Clone a prototype object and populate the clone from a mapping.

    The prototype is never mutated; every call to :meth:`hydrate` works on a
    fresh ``copy.copy`` of it.
    """

    def __init__(self, prototype: Hydratable | None = None) -> None:
        self._prototype: Hydratable | None = None
        if prototype is not None:
            self.set_prototype(prototype)

    @property
    def prototype(self) -> Hydratable | None:
        return self._prototype

    def set_prototype(self, prototype: Hydratable) -> None:
        if not callable(getattr(prototype, "populate", None)):
            raise TypeError(f"{type(prototype).__name__} cannot be populated from a mapping")
        self._prototype = prototype

    def hydrate(self, data: Mapping[str, Any]) -> Any:
        if self._prototype is None:
            raise ConfigurationError("ArrayHydrator has no prototype configured")

        obj = copy.copy(self._prototype)
        obj.populate(data)
        return obj

    def hydrate_object(self, data: Mapping[str, Any], obj: T) -> T:
        obj.populate(data)
        return obj
