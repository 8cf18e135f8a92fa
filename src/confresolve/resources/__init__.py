"""Resource handles and the converter that creates them from identifiers."""

from .base import Resource
from .converter import (
    DEFAULT_SCHEME,
    DEFAULT_SCHEME_ENV,
    FileResourceTypeHandler,
    InMemoryResourceTypeHandler,
    PackageResourceTypeHandler,
    ResourceConverter,
    ResourceTypeHandler,
    UrlResourceTypeHandler,
    default_handlers,
)
from .file import FileResource
from .memory import InMemoryResource
from .package import PackageResource
from .url import UrlResource

__all__ = [
    "DEFAULT_SCHEME",
    "DEFAULT_SCHEME_ENV",
    "FileResource",
    "FileResourceTypeHandler",
    "InMemoryResource",
    "InMemoryResourceTypeHandler",
    "PackageResource",
    "PackageResourceTypeHandler",
    "Resource",
    "ResourceConverter",
    "ResourceTypeHandler",
    "UrlResource",
    "UrlResourceTypeHandler",
    "default_handlers",
]
