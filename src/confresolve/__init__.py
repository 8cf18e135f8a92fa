"""Configuration resolution interceptor."""

from .environment import Environment, StandardEnvironment
from .errors import ClassNotFoundError, InterceptorError, ResourceConversionError, ResourceReadOnlyError
from .home import HomeFolder, default_home_folder
from .interceptor import ConfigurationReaderInterceptor, DefaultConfigurationReaderInterceptor
from .overrides import PropertyOverrides
from .registry import ClassRegistry

__all__ = [
    "ClassNotFoundError",
    "ClassRegistry",
    "ConfigurationReaderInterceptor",
    "DefaultConfigurationReaderInterceptor",
    "Environment",
    "HomeFolder",
    "InterceptorError",
    "PropertyOverrides",
    "ResourceConversionError",
    "ResourceReadOnlyError",
    "StandardEnvironment",
    "default_home_folder",
]
