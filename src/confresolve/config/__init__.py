"""Settings models and loaders for confresolve."""

from .loader import ConfigError, load_settings
from .models import InterceptorSettings

__all__ = [
    "ConfigError",
    "InterceptorSettings",
    "load_settings",
]
