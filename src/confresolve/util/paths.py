"""Lexical path resolution against a root directory."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


class FileResolver:
    """Resolve file names relative to ``base_dir`` and normalize them."""

    def __init__(self, base_dir: str | os.PathLike[str]) -> None:
        self._base_dir = Path(os.path.abspath(base_dir))

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def to_file(self, filename: str | os.PathLike[str] | None) -> Path | None:
        """Return ``filename`` as a path, joined onto the base dir when relative."""

        if filename is None:
            return None
        candidate = Path(filename)
        if candidate.is_absolute():
            return candidate
        return self._base_dir / candidate

    def to_path(self, file: str | os.PathLike[str] | None) -> str | None:
        """Return the normalized absolute form of ``file`` using ``/`` separators.

        Normalization is purely lexical: ``.`` and ``..`` segments are collapsed
        and symlinks are not followed, so the file does not need to exist.
        """

        if file is None:
            return None
        joined = os.path.join(self._base_dir, os.fspath(file))
        return PurePath(os.path.normpath(joined)).as_posix()

    def resolve(self, filename: str | os.PathLike[str] | None) -> str | None:
        return self.to_path(self.to_file(filename))


__all__ = ["FileResolver"]
