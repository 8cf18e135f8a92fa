"""Common interface for readable and writable resource handles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, TypeVar

from confresolve.errors import ResourceReadOnlyError

T = TypeVar("T")


class Resource(ABC):
    """A named blob of bytes that can be opened for reading and, optionally, writing."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name, usually the last path segment."""

    @property
    @abstractmethod
    def qualified_path(self) -> str:
        """Path that identifies the resource within its scheme."""

    @property
    @abstractmethod
    def exists(self) -> bool:
        ...

    @property
    def is_read_only(self) -> bool:
        return True

    @property
    def size(self) -> int | None:
        return None

    @property
    def last_modified(self) -> float | None:
        return None

    @abstractmethod
    def open_read(self) -> BinaryIO:
        """Return a binary stream; callers are responsible for closing it."""

    def open_write(self) -> BinaryIO:
        raise ResourceReadOnlyError(f"Resource is read-only: {self.qualified_path}")

    def open_append(self) -> BinaryIO:
        raise ResourceReadOnlyError(f"Resource is read-only: {self.qualified_path}")

    def read(self, func: Callable[[BinaryIO], T]) -> T:
        """Apply ``func`` to an open read stream and return its result."""

        with self.open_read() as stream:
            return func(stream)

    def read_bytes(self) -> bytes:
        return self.read(lambda stream: stream.read())

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read_bytes().decode(encoding)

    def write_bytes(self, data: bytes) -> None:
        with self.open_write() as stream:
            stream.write(data)

    def write_text(self, text: str, encoding: str = "utf-8") -> None:
        self.write_bytes(text.encode(encoding))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qualified_path!r})"


__all__ = ["Resource"]
