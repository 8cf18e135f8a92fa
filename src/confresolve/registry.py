"""Name-based lookup of classes referenced from configuration."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from confresolve.errors import ClassNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClassRegistry:
    """Maps identifiers to classes or factories.

    Registered names are looked up first. Unregistered dotted names are
    imported with :mod:`importlib` unless ``allow_import`` is false.
    """

    def __init__(self, entries: dict[str, Any] | None = None, *, allow_import: bool = True) -> None:
        self._entries: dict[str, Any] = dict(entries or {})
        self.allow_import = allow_import

    def register(self, name: str, target: Any, *, replace: bool = False) -> None:
        if not replace and name in self._entries:
            raise ValueError(f"'{name}' is already registered.")
        self._entries[name] = target

    def register_as(self, name: str) -> Callable[[T], T]:
        """Decorator form of :meth:`register`."""

        def decorator(target: T) -> T:
            self.register(name, target)
            return target

        return decorator

    def unregister(self, name: str) -> None:
        self._entries.pop(name, None)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def load(self, name: str) -> Any:
        """Return the class registered or importable under ``name``."""

        if name in self._entries:
            return self._entries[name]
        if not self.allow_import:
            raise ClassNotFoundError(name, f"Unknown identifier: {name}")
        return _import_by_name(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _import_by_name(name: str) -> Any:
    """Import ``package.module.Outer.Inner`` style names."""

    parts = name.split(".") if name else []
    if len(parts) < 2 or not all(parts):
        raise ClassNotFoundError(name)

    # Try the longest importable module prefix, then walk attributes.
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name is not None and not _is_prefix(exc.name, module_name):
                raise ClassNotFoundError(name) from exc
            continue
        try:
            for attribute in parts[split:]:
                target = getattr(target, attribute)
        except AttributeError as exc:
            raise ClassNotFoundError(name) from exc
        if not isinstance(target, type):
            raise ClassNotFoundError(name, f"'{name}' does not name a class")
        logger.debug("Imported %s", name)
        return target
    raise ClassNotFoundError(name)


def _is_prefix(candidate: str, module_name: str) -> bool:
    return module_name == candidate or module_name.startswith(candidate + ".")


__all__ = ["ClassRegistry"]
