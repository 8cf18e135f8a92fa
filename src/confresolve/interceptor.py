"""Configuration reader interceptor.

The configuration-loading pipeline holds a single interceptor and asks it
every environment-specific question: where a relative file lives, how to
open a resource identifier, whether a property is overridden, which class a
name refers to. :class:`DefaultConfigurationReaderInterceptor` answers them
without any special treatment; callers customize it by passing suppliers
to the constructor or by overriding the ``get_*`` methods.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol, Union, runtime_checkable

from confresolve.environment import Environment, StandardEnvironment
from confresolve.home import HomeFolder, default_home_folder
from confresolve.overrides import EnvironmentLookup, PropertyOverrides
from confresolve.registry import ClassRegistry
from confresolve.resources.base import Resource
from confresolve.resources.converter import ResourceConverter, ResourceTypeHandler
from confresolve.resources.file import FileResource
from confresolve.util.paths import FileResolver

logger = logging.getLogger(__name__)

HomeFolderSource = Union[HomeFolder, str, os.PathLike, Callable[[], Union[HomeFolder, str, os.PathLike]]]


@runtime_checkable
class ConfigurationReaderInterceptor(Protocol):
    """Questions the configuration pipeline delegates to its environment."""

    def create_filename(self, filename: str | None) -> str | None:
        ...

    def create_resource(self, resource_url: str, temporary_configuration: Any) -> Resource:
        ...

    def get_property_override(self, variable_path: str) -> str | None:
        ...

    def get_home_folder(self) -> HomeFolder:
        ...

    def get_temporary_storage_directory(self) -> str:
        ...

    def load_class(self, class_name: str) -> type:
        ...

    def create_base_environment(self) -> Environment:
        ...


class DefaultConfigurationReaderInterceptor:
    """Interceptor that resolves everything the plain way.

    Property overrides come from ``property_overrides`` or, alternatively,
    from a properties-formatted ``properties_resource``. Supplying both is an
    error. A missing resource simply means no overrides.
    """

    def __init__(
        self,
        property_overrides: Mapping[str, str] | None = None,
        *,
        properties_resource: Resource | None = None,
        base_environment: Environment | None = None,
        home_folder: HomeFolderSource | None = None,
        relative_parent_directory: Callable[[], Path] | None = None,
        extra_resource_type_handlers: Iterable[ResourceTypeHandler] | None = None,
        environment_lookup: EnvironmentLookup | None = None,
        class_registry: ClassRegistry | None = None,
        default_scheme: str | None = None,
    ) -> None:
        if property_overrides is not None and properties_resource is not None:
            raise ValueError("Pass either property_overrides or properties_resource, not both.")

        if properties_resource is not None:
            self._property_overrides = PropertyOverrides.from_resource(
                properties_resource, environment_lookup=environment_lookup
            )
        else:
            self._property_overrides = PropertyOverrides(
                property_overrides, environment_lookup=environment_lookup
            )
        self._base_environment = base_environment if base_environment is not None else StandardEnvironment()
        self._home_folder = home_folder
        self._relative_parent_directory = relative_parent_directory
        self._extra_resource_type_handlers = list(extra_resource_type_handlers or [])
        self._class_registry = class_registry if class_registry is not None else ClassRegistry()
        self._default_scheme = default_scheme

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> "DefaultConfigurationReaderInterceptor":
        """Build an interceptor from :class:`~confresolve.config.InterceptorSettings`."""

        if settings.properties_file is not None:
            kwargs.setdefault("properties_resource", FileResource(settings.properties_file))
        elif settings.property_overrides:
            kwargs.setdefault("property_overrides", dict(settings.property_overrides))
        if settings.home_folder is not None:
            kwargs.setdefault("home_folder", settings.home_folder)
        if settings.default_scheme:
            kwargs.setdefault("default_scheme", settings.default_scheme)
        kwargs.setdefault("class_registry", ClassRegistry(allow_import=settings.allow_import))
        return cls(**kwargs)

    @property
    def property_overrides(self) -> PropertyOverrides:
        return self._property_overrides

    def create_filename(self, filename: str | None) -> str | None:
        if filename is None:
            return None

        # relative resolving of the file plus path normalization
        resolver = self.create_file_resolver()
        return resolver.to_path(resolver.to_file(filename))

    def create_file_resolver(self) -> FileResolver:
        return FileResolver(self.get_home_folder().to_file())

    def create_resource(self, resource_url: str, temporary_configuration: Any = None) -> Resource:
        converter = ResourceConverter(
            temporary_configuration,
            self._default_scheme or ResourceConverter.configured_default_scheme(),
            base_dir=self.get_relative_parent_directory,
        ).with_extra_handlers(self.get_extra_resource_type_handlers())
        return converter.from_string(resource_url)

    def get_extra_resource_type_handlers(self) -> list[ResourceTypeHandler]:
        """Handlers consulted after the built-in ones, in order."""

        return list(self._extra_resource_type_handlers)

    def get_relative_parent_directory(self) -> Path:
        """Root for relative resource paths; the home folder unless overridden."""

        if self._relative_parent_directory is not None:
            return Path(self._relative_parent_directory())
        return self.get_home_folder().to_file()

    def get_temporary_storage_directory(self) -> str:
        return os.path.abspath(tempfile.gettempdir())

    def load_class(self, class_name: str) -> type:
        return self._class_registry.load(class_name)

    def get_property_override(self, variable_path: str) -> str | None:
        return self._property_overrides.lookup(variable_path)

    def get_home_folder(self) -> HomeFolder:
        source = self._home_folder
        if source is None:
            return default_home_folder()
        if callable(source):
            source = source()
        return HomeFolder.of(source)

    def create_base_environment(self) -> Environment:
        return self._base_environment


__all__ = [
    "ConfigurationReaderInterceptor",
    "DefaultConfigurationReaderInterceptor",
    "HomeFolderSource",
]
