"""
Configuration module for the strength tracker system.
Provides dynamic configuration without hardcoded values.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List
import os

METRICS = ("maxWeight", "maxOneRepMax", "totalVolume")
GROUPINGS = ("workout", "day", "week")

@dataclass
class StorageSettings:
    """Export storage configuration."""
    storage_dir: str = "storage"  # One export file per user
    max_upload_bytes: int = 10 << 20  # 10 MiB

@dataclass
class ServerSettings:
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    compress: bool = True  # gzip responses
    log_level: str = "INFO"

@dataclass
class DashboardSettings:
    """Dashboard display configuration."""
    featured_exercises: List[str] = field(default_factory=lambda: [
        "Squat",
        "Deadlift",
        "Bench Press",
        "Overhead Press",
        "Bent Over Row",
    ])
    default_metric: str = "maxWeight"
    default_grouping: str = "day"

class TrackerConfig:
    """Main configuration class for the strength tracker system."""

    def __init__(self):
        self.storage = StorageSettings()
        self.server = ServerSettings()
        self.dashboard = DashboardSettings()
        self._user_inputs: Dict[str, Any] = {}

    @classmethod
    def from_env(cls) -> "TrackerConfig":
        """Build a configuration with STRENGTH_TRACKER_* environment overrides."""
        config = cls()
        env = os.environ
        if "STRENGTH_TRACKER_STORAGE_DIR" in env:
            config.update_storage_settings(storage_dir=env["STRENGTH_TRACKER_STORAGE_DIR"])
        if "STRENGTH_TRACKER_MAX_UPLOAD_BYTES" in env:
            config.update_storage_settings(max_upload_bytes=int(env["STRENGTH_TRACKER_MAX_UPLOAD_BYTES"]))
        if "STRENGTH_TRACKER_HOST" in env:
            config.update_server_settings(host=env["STRENGTH_TRACKER_HOST"])
        if "STRENGTH_TRACKER_PORT" in env:
            config.update_server_settings(port=int(env["STRENGTH_TRACKER_PORT"]))
        if "STRENGTH_TRACKER_DEBUG" in env:
            config.update_server_settings(debug=env["STRENGTH_TRACKER_DEBUG"].lower() in ("1", "true", "yes"))
        if "STRENGTH_TRACKER_LOG_LEVEL" in env:
            config.update_server_settings(log_level=env["STRENGTH_TRACKER_LOG_LEVEL"].upper())
        return config

    def _update(self, group_name: str, settings, **kwargs):
        for key, value in kwargs.items():
            if hasattr(settings, key):
                setattr(settings, key, value)
                self._user_inputs[f'{group_name}_{key}'] = value
            else:
                raise ValueError(f"Unknown {group_name} setting: {key}")

    def update_storage_settings(self, **kwargs):
        """Update storage settings dynamically."""
        self._update('storage', self.storage, **kwargs)

    def update_server_settings(self, **kwargs):
        """Update server settings dynamically."""
        self._update('server', self.server, **kwargs)

    def update_dashboard_settings(self, **kwargs):
        """Update dashboard settings dynamically."""
        self._update('dashboard', self.dashboard, **kwargs)

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration summary."""
        return {
            'storage_settings': {
                'storage_dir': self.storage.storage_dir,
                'max_upload_bytes': self.storage.max_upload_bytes,
            },
            'server_settings': {
                'host': self.server.host,
                'port': self.server.port,
                'debug': self.server.debug,
            },
            'user_inputs': self._user_inputs
        }

    def validate_configuration(self) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if self.storage.max_upload_bytes <= 0:
            errors.append("Upload size limit must be greater than 0")

        if not 0 < self.server.port < 65536:
            errors.append(f"Invalid server port: {self.server.port}")

        if self.dashboard.default_metric not in METRICS:
            errors.append(f"Unknown default metric: {self.dashboard.default_metric}")

        if self.dashboard.default_grouping not in GROUPINGS:
            errors.append(f"Unknown default grouping: {self.dashboard.default_grouping}")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")

        return True

# Global configuration instance
config = TrackerConfig()

def get_config() -> TrackerConfig:
    """Get the global configuration instance."""
    return config

def set_config(new_config: TrackerConfig) -> TrackerConfig:
    """Replace the global configuration instance."""
    global config
    config = new_config
    return config

def reset_config() -> TrackerConfig:
    """Reset configuration to defaults."""
    global config
    config = TrackerConfig()
    return config
