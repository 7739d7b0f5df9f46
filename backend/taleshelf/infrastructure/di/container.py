"""Dependency injection container owned by the running application."""
from __future__ import annotations

from typing import TypeVar, Type, Dict, Callable, Any
import threading

T = TypeVar("T")


class Container:
    """Registry of lazily built singletons, one set per container."""

    def __init__(self) -> None:
        self._factories: Dict[Type, Callable[["Container"], Any]] = {}
        self._singletons: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    def register(self, interface: Type[T], factory: Callable[["Container"], T]) -> None:
        with self._lock:
            self._factories[interface] = factory
            self._singletons.pop(interface, None)

    def resolve(self, interface: Type[T]) -> T:
        if interface not in self._factories:
            raise KeyError(f"No registration found for {interface.__name__}")

        # Re-entrant: factories may resolve their own dependencies.
        with self._lock:
            if interface not in self._singletons:
                self._singletons[interface] = self._factories[interface](self)
            return self._singletons[interface]
