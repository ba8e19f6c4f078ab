"""Config package exports."""

from .schema import (
    AppConfig,
    MetricsConfig,
    PlayConfig,
    SearchConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "MetricsConfig",
    "PlayConfig",
    "SearchConfig",
    "load_config",
]
