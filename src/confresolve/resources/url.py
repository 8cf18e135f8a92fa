"""Read-only resources fetched over HTTP(S)."""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import BinaryIO

import requests

from .base import Resource

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_HEADERS: Mapping[str, str] = {
    "User-Agent": "confresolve",
    "Accept": "*/*",
}


class UrlResource(Resource):
    """Resource whose contents are downloaded from ``url`` on each read."""

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds
        merged_headers = dict(DEFAULT_HEADERS)
        if headers:
            merged_headers.update(headers)
        self._headers = merged_headers

    @property
    def url(self) -> str:
        return self._url

    @property
    def name(self) -> str:
        path = self._url.split("://", 1)[-1].split("?", 1)[0]
        return path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def qualified_path(self) -> str:
        return self._url

    @property
    def exists(self) -> bool:
        try:
            response = requests.head(
                self._url,
                timeout=self._timeout_seconds,
                headers=self._headers,
                allow_redirects=True,
            )
        except requests.ConnectionError:
            return False
        return response.status_code < 400

    def open_read(self) -> BinaryIO:
        response = requests.get(self._url, timeout=self._timeout_seconds, headers=self._headers)
        if response.status_code == 404:
            raise FileNotFoundError(f"Resource not found at {self._url}")
        response.raise_for_status()
        return io.BytesIO(response.content)


__all__ = ["UrlResource"]
