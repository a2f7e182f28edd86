"""Configuration management for clipgraph."""

from clipgraph.core.config.loader import (
    apply_logging_config,
    detect_format,
    load_app_config,
    load_config,
)
from clipgraph.core.config.models import AppConfig, LoggingConfig

__all__ = [
    # Loaders
    "apply_logging_config",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "LoggingConfig",
]
