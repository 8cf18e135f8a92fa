"""Exception hierarchy shared by the interceptor and its collaborators."""

from __future__ import annotations


class InterceptorError(Exception):
    """Base class for errors raised by confresolve."""


class ResourceConversionError(InterceptorError, ValueError):
    """Raised when a resource identifier cannot be turned into a resource."""


class ResourceReadOnlyError(InterceptorError, PermissionError):
    """Raised when writing to a resource that only supports reading."""


class ClassNotFoundError(InterceptorError, LookupError):
    """Raised when a class name cannot be resolved to a type."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"Class not found: {name}")
        self.name = name


__all__ = [
    "ClassNotFoundError",
    "InterceptorError",
    "ResourceConversionError",
    "ResourceReadOnlyError",
]
