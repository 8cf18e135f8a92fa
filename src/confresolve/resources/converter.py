"""Conversion between ``scheme://path`` identifiers and resource handles."""

from __future__ import annotations

import logging
import os
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Callable

from confresolve.errors import ResourceConversionError
from confresolve.util.paths import FileResolver

from .base import Resource
from .file import FileResource
from .memory import InMemoryResource
from .package import PackageResource
from .url import UrlResource

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "file"
DEFAULT_SCHEME_ENV = "CONFRESOLVE_RESOURCE_DEFAULT_SCHEME"

_IDENTIFIER = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://(?P<path>.*)$", re.DOTALL)


class ResourceTypeHandler(ABC):
    """Turns paths of one scheme into resources and back."""

    scheme: str

    def accepts_scheme(self, scheme: str) -> bool:
        return scheme.lower() == self.scheme.lower()

    @abstractmethod
    def is_parser_for(self, resource: Resource) -> bool:
        ...

    @abstractmethod
    def parse_path(self, configuration: Any, path: str) -> Resource:
        ...

    @abstractmethod
    def create_path(self, resource: Resource) -> str:
        ...


def _require(resource: Resource, kind: type[Resource]) -> None:
    if not isinstance(resource, kind):
        raise ResourceConversionError(f"Expected a {kind.__name__}, got {resource!r}")


class FileResourceTypeHandler(ResourceTypeHandler):
    """Local files; relative paths are resolved against ``base_dir``."""

    scheme = "file"

    def __init__(self, base_dir: str | os.PathLike[str] | Callable[[], Path] | None = None) -> None:
        self._base_dir = base_dir

    def _resolver(self) -> FileResolver:
        base_dir = self._base_dir() if callable(self._base_dir) else self._base_dir
        return FileResolver(base_dir if base_dir is not None else os.getcwd())

    def is_parser_for(self, resource: Resource) -> bool:
        return isinstance(resource, FileResource)

    def parse_path(self, configuration: Any, path: str) -> Resource:
        resolver = self._resolver()
        return FileResource(resolver.resolve(path))

    def create_path(self, resource: Resource) -> str:
        _require(resource, FileResource)
        resolver = self._resolver()
        path = resolver.to_path(resource.path)
        base = resolver.base_dir.as_posix().rstrip("/") + "/"
        if path.startswith(base):
            return path[len(base) :]
        return path


class UrlResourceTypeHandler(ResourceTypeHandler):
    """HTTP(S) URLs. One handler instance serves one scheme."""

    def __init__(self, scheme: str = "http", *, timeout_seconds: float | None = None) -> None:
        self.scheme = scheme
        self._timeout_seconds = timeout_seconds

    def is_parser_for(self, resource: Resource) -> bool:
        return isinstance(resource, UrlResource) and resource.url.lower().startswith(f"{self.scheme.lower()}://")

    def parse_path(self, configuration: Any, path: str) -> Resource:
        url = f"{self.scheme}://{path}"
        if self._timeout_seconds is None:
            return UrlResource(url)
        return UrlResource(url, timeout_seconds=self._timeout_seconds)

    def create_path(self, resource: Resource) -> str:
        _require(resource, UrlResource)
        return resource.url.split("://", 1)[1]


class PackageResourceTypeHandler(ResourceTypeHandler):
    """``pkg://dotted.package/relative/file`` data files."""

    scheme = "pkg"

    def is_parser_for(self, resource: Resource) -> bool:
        return isinstance(resource, PackageResource)

    def parse_path(self, configuration: Any, path: str) -> Resource:
        package, sep, relative = path.partition("/")
        if not package or not sep or not relative.strip("/"):
            raise ResourceConversionError(f"Package resource path must be 'package/path', got {path!r}")
        return PackageResource(package, relative)

    def create_path(self, resource: Resource) -> str:
        _require(resource, PackageResource)
        return resource.qualified_path


class InMemoryResourceTypeHandler(ResourceTypeHandler):
    """``mem://name`` resources backed by a shared store of named buffers.

    Not registered by default; pass an instance as an extra handler.
    """

    scheme = "mem"

    def __init__(self, store: MutableMapping[str, InMemoryResource] | None = None) -> None:
        self._store = store if store is not None else {}

    @property
    def store(self) -> MutableMapping[str, InMemoryResource]:
        return self._store

    def is_parser_for(self, resource: Resource) -> bool:
        return isinstance(resource, InMemoryResource)

    def parse_path(self, configuration: Any, path: str) -> Resource:
        resource = self._store.get(path)
        if resource is None:
            resource = InMemoryResource(path)
            self._store[path] = resource
        return resource

    def create_path(self, resource: Resource) -> str:
        return resource.qualified_path


def default_handlers(base_dir: str | os.PathLike[str] | Callable[[], Path] | None = None) -> list[ResourceTypeHandler]:
    """Return the built-in handlers, in matching order."""

    return [
        FileResourceTypeHandler(base_dir),
        UrlResourceTypeHandler("http"),
        UrlResourceTypeHandler("https"),
        PackageResourceTypeHandler(),
    ]


class ResourceConverter:
    """Parse resource identifiers using an ordered list of handlers."""

    def __init__(
        self,
        configuration: Any = None,
        default_scheme: str | None = None,
        *,
        handlers: Iterable[ResourceTypeHandler] | None = None,
        base_dir: str | os.PathLike[str] | Callable[[], Path] | None = None,
    ) -> None:
        self._configuration = configuration
        self._default_scheme = default_scheme or self.configured_default_scheme()
        if handlers is None:
            self._handlers: tuple[ResourceTypeHandler, ...] = tuple(default_handlers(base_dir))
        else:
            self._handlers = tuple(handlers)

    @staticmethod
    def configured_default_scheme(environ: Mapping[str, str] | None = None) -> str:
        """Default scheme from ``CONFRESOLVE_RESOURCE_DEFAULT_SCHEME``, else ``file``."""

        source = os.environ if environ is None else environ
        value = source.get(DEFAULT_SCHEME_ENV, "").strip()
        return value or DEFAULT_SCHEME

    @property
    def default_scheme(self) -> str:
        return self._default_scheme

    @property
    def handlers(self) -> Sequence[ResourceTypeHandler]:
        return self._handlers

    def with_extra_handlers(self, extra_handlers: Iterable[ResourceTypeHandler]) -> "ResourceConverter":
        """Return a copy with ``extra_handlers`` appended after the current ones."""

        return ResourceConverter(
            self._configuration,
            self._default_scheme,
            handlers=[*self._handlers, *extra_handlers],
        )

    def from_string(self, value: str | None) -> Resource:
        scheme, path = self._split(value)
        for handler in self._handlers:
            if handler.accepts_scheme(scheme):
                logger.debug("Parsing %r with %s handler", value, type(handler).__name__)
                return handler.parse_path(self._configuration, path)
        raise ResourceConversionError(f"No resource handler for scheme {scheme!r} in {value!r}")

    def to_string(self, resource: Resource) -> str:
        for handler in self._handlers:
            if handler.is_parser_for(resource):
                return f"{handler.scheme}://{handler.create_path(resource)}"
        raise ResourceConversionError(f"No resource handler for {resource!r}")

    def _split(self, value: str | None) -> tuple[str, str]:
        if value is None or not value.strip():
            raise ResourceConversionError("Resource identifier must be a non-empty string")
        value = value.strip()
        match = _IDENTIFIER.match(value)
        if match:
            scheme, path = match.group("scheme"), match.group("path")
        elif "://" in value:
            raise ResourceConversionError(f"Malformed resource identifier {value!r}")
        else:
            scheme, path = self._default_scheme, value
        if not path:
            raise ResourceConversionError(f"Resource identifier {value!r} has an empty path")
        return scheme, path


__all__ = [
    "DEFAULT_SCHEME",
    "DEFAULT_SCHEME_ENV",
    "FileResourceTypeHandler",
    "InMemoryResourceTypeHandler",
    "PackageResourceTypeHandler",
    "ResourceConverter",
    "ResourceTypeHandler",
    "UrlResourceTypeHandler",
    "default_handlers",
]
