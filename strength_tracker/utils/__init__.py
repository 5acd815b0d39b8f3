"""Utility modules for configuration."""

from .config import (
    TrackerConfig,
    StorageSettings,
    ServerSettings,
    DashboardSettings,
    METRICS,
    GROUPINGS,
    get_config,
    set_config,
    reset_config
)

__all__ = [
    "TrackerConfig",
    "StorageSettings",
    "ServerSettings",
    "DashboardSettings",
    "METRICS",
    "GROUPINGS",
    "get_config",
    "set_config",
    "reset_config"
]
