from __future__ import annotations

from pathlib import Path
from typing import Mapping

import requests

from confresolve.interceptor import DefaultConfigurationReaderInterceptor


class FakeEnvironmentLookup:
    """Deterministic stand-in for ``os.environ.get`` that records queried keys."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.queried: list[str] = []

    def __call__(self, key: str) -> str | None:
        self.queried.append(key)
        return self.values.get(key)


class DummyResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


def make_interceptor(
    home: Path,
    *,
    overrides: Mapping[str, str] | None = None,
    ambient: Mapping[str, str] | None = None,
    **kwargs,
) -> DefaultConfigurationReaderInterceptor:
    """Build an interceptor rooted at ``home`` with a fake environment lookup."""

    return DefaultConfigurationReaderInterceptor(
        overrides,
        home_folder=home,
        environment_lookup=FakeEnvironmentLookup(ambient),
        **kwargs,
    )


def write_properties(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
