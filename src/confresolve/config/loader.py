"""Settings loading entry points for confresolve."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from confresolve.home import HOME_ENV

from .models import InterceptorSettings

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when settings files cannot be loaded or validated."""


def load_settings(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> InterceptorSettings:
    """Load interceptor settings from ``path`` applying optional overrides."""

    data: dict[str, Any] = {}
    if path is not None:
        data = _anchor_relative_paths(_expect_mapping(_read_structured_file(path), path), path)
        logger.debug("Loaded settings from %s", path)

    if overrides:
        data = _deep_merge(data, _expand_override_keys(overrides))

    if data.get("home_folder") is None:
        env_home = os.getenv(HOME_ENV, "").strip()
        if env_home:
            data["home_folder"] = env_home

    try:
        return InterceptorSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings{f' in {path}' if path else ''}: {exc}") from exc


def _anchor_relative_paths(data: dict[str, Any], source: Path) -> dict[str, Any]:
    """Resolve relative locations in a settings file against its directory."""

    for key in ("home_folder", "properties_file"):
        value = data.get(key)
        if not isinstance(value, str):
            continue
        candidate = Path(value).expanduser()
        if not candidate.is_absolute():
            data[key] = source.parent.absolute() / candidate
    return data


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix == ".json":
        return json.loads(text)

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``property_overrides.db.url``.

    Only the first dot splits; the rest of the key stays intact so that
    dotted property names survive as single keys.
    """

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(key, str) and "." in key:
            head, tail = key.split(".", 1)
            converted: dict[str, Any] = {head: {tail: value}}
        else:
            converted = {key: value}
        result = _deep_merge(result, converted)
    return result


__all__ = [
    "ConfigError",
    "load_settings",
]
