"""Read-only property overrides with an environment fallback."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Callable

from confresolve.resources.base import Resource
from confresolve.util.properties import load_properties

logger = logging.getLogger(__name__)

EnvironmentLookup = Callable[[str], "str | None"]


class PropertyOverrides(Mapping[str, str]):
    """Immutable ``key -> value`` overrides consulted before the environment.

    Lookups check the explicit overrides first, then ``environment_lookup``
    (``os.environ.get`` by default). This precedence is part of the contract.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        *,
        environment_lookup: EnvironmentLookup | None = None,
    ) -> None:
        self._values: Mapping[str, str] = MappingProxyType(dict(overrides or {}))
        self._environment_lookup = environment_lookup or os.environ.get

    @classmethod
    def from_resource(
        cls,
        resource: Resource | None,
        *,
        environment_lookup: EnvironmentLookup | None = None,
    ) -> "PropertyOverrides":
        """Parse a properties resource; a missing resource yields no overrides."""

        if resource is None or not resource.exists:
            logger.debug("No property overrides resource found: %r", resource)
            return cls(environment_lookup=environment_lookup)
        values = resource.read(load_properties)
        logger.debug("Loaded %d property overrides from %s", len(values), resource.qualified_path)
        return cls(values, environment_lookup=environment_lookup)

    def lookup(self, key: str) -> str | None:
        value = self._values.get(key)
        if value is None:
            value = self._environment_lookup(key)
        return value

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PropertyOverrides({dict(self._values)!r})"


__all__ = ["EnvironmentLookup", "PropertyOverrides"]
