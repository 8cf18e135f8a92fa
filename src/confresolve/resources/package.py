"""Read-only resources bundled inside importable Python packages."""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from typing import BinaryIO

from .base import Resource


class PackageResource(Resource):
    """Data file shipped inside ``package`` at the ``/``-separated ``path``."""

    def __init__(self, package: str, path: str) -> None:
        self._package = package
        self._path = path.strip("/")

    @property
    def package(self) -> str:
        return self._package

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._path.rsplit("/", 1)[-1]

    @property
    def qualified_path(self) -> str:
        return f"{self._package}/{self._path}"

    @property
    def exists(self) -> bool:
        try:
            return self._traversable().is_file()
        except ModuleNotFoundError:
            return False

    def open_read(self) -> BinaryIO:
        return self._traversable().open("rb")

    def _traversable(self) -> Traversable:
        node = resources.files(self._package)
        for segment in self._path.split("/"):
            node = node.joinpath(segment)
        return node


__all__ = ["PackageResource"]
