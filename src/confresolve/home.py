"""Home folder used as the root for relative configuration paths."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from confresolve.resources.file import FileResource

HOME_ENV = "CONFRESOLVE_HOME"


@dataclass(frozen=True)
class HomeFolder:
    """A directory reference; it does not need to exist."""

    path: Path

    def to_file(self) -> Path:
        return self.path

    def to_resource(self) -> FileResource:
        return FileResource(self.path)

    @classmethod
    def of(cls, value: "HomeFolder | str | os.PathLike[str]") -> "HomeFolder":
        if isinstance(value, HomeFolder):
            return value
        return cls(Path(os.path.abspath(value)))


def default_home_folder() -> HomeFolder:
    """Return ``$CONFRESOLVE_HOME`` when set, otherwise the working directory."""

    configured = os.environ.get(HOME_ENV, "").strip()
    if configured:
        return HomeFolder.of(Path(configured).expanduser())
    return HomeFolder.of(Path.cwd())


__all__ = ["HOME_ENV", "HomeFolder", "default_home_folder"]
