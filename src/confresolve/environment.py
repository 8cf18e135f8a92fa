"""Base environment handed to the configuration pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Environment(Protocol):
    """Opaque environment object; confresolve never inspects it."""


@dataclass(frozen=True)
class StandardEnvironment:
    """Default environment used when none is supplied."""

    name: str = "standard"
    attributes: Mapping[str, Any] = field(default_factory=dict)


__all__ = ["Environment", "StandardEnvironment"]
