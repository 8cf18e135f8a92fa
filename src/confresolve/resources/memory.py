"""In-memory resources for generated content and tests."""

from __future__ import annotations

import io
import time
from typing import BinaryIO

from .base import Resource


class _CommitOnClose(io.BytesIO):
    def __init__(self, owner: "InMemoryResource", initial: bytes = b"") -> None:
        super().__init__()
        self._owner = owner
        if initial:
            self.write(initial)

    def close(self) -> None:
        if not self.closed:
            self._owner._commit(self.getvalue())
        super().close()


class InMemoryResource(Resource):
    """A named byte buffer. Writes become visible once the stream is closed."""

    def __init__(self, path: str, contents: bytes | None = None) -> None:
        self._path = path
        self._contents = contents
        self._last_modified = time.time() if contents is not None else None

    @property
    def name(self) -> str:
        return self._path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def qualified_path(self) -> str:
        return self._path

    @property
    def exists(self) -> bool:
        return self._contents is not None

    @property
    def is_read_only(self) -> bool:
        return False

    @property
    def size(self) -> int | None:
        return None if self._contents is None else len(self._contents)

    @property
    def last_modified(self) -> float | None:
        return self._last_modified

    def open_read(self) -> BinaryIO:
        if self._contents is None:
            raise FileNotFoundError(f"In-memory resource has no contents: {self._path}")
        return io.BytesIO(self._contents)

    def open_write(self) -> BinaryIO:
        return _CommitOnClose(self)

    def open_append(self) -> BinaryIO:
        return _CommitOnClose(self, self._contents or b"")

    def _commit(self, data: bytes) -> None:
        self._contents = data
        self._last_modified = time.time()


__all__ = ["InMemoryResource"]
