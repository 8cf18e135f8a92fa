"""Resources backed by the local filesystem."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from .base import Resource


class FileResource(Resource):
    """A writable resource pointing at a local file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def qualified_path(self) -> str:
        return self._path.as_posix()

    @property
    def exists(self) -> bool:
        return self._path.exists()

    @property
    def is_read_only(self) -> bool:
        return False

    @property
    def size(self) -> int | None:
        if not self._path.is_file():
            return None
        return self._path.stat().st_size

    @property
    def last_modified(self) -> float | None:
        if not self._path.exists():
            return None
        return self._path.stat().st_mtime

    def open_read(self) -> BinaryIO:
        return self._path.open("rb")

    def open_write(self) -> BinaryIO:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        return self._path.open("wb")

    def open_append(self) -> BinaryIO:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        return self._path.open("ab")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FileResource) and other._path == self._path

    def __hash__(self) -> int:
        return hash(self._path)


__all__ = ["FileResource"]
