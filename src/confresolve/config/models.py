"""Pydantic models describing interceptor settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class InterceptorSettings(BaseModel):
    """Settings used to build a default configuration reader interceptor."""

    model_config = ConfigDict(extra="allow")

    home_folder: Optional[Path] = None
    properties_file: Optional[Path] = None
    property_overrides: Dict[str, str] = Field(default_factory=dict)
    default_scheme: Optional[str] = None
    allow_import: bool = True
    log_level: str = "INFO"

    @field_validator("property_overrides", mode="before")
    @classmethod
    def _stringify_overrides(cls, value: Any) -> Any:
        """Property values are strings; YAML/TOML scalars are converted."""

        if not isinstance(value, Mapping):
            return value
        result: dict[str, str] = {}
        for key, item in value.items():
            if isinstance(item, bool):
                item = str(item).lower()
            elif isinstance(item, (int, float)):
                item = str(item)
            result[str(key)] = item
        return result

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @model_validator(mode="after")
    def _validate_override_source(self) -> "InterceptorSettings":
        """Overrides come either from a properties file or inline, never both."""

        if self.properties_file is not None and self.property_overrides:
            raise ValueError("property_overrides and properties_file are mutually exclusive.")
        return self


__all__ = ["InterceptorSettings"]
