"""Configuration for maas-bridge."""

from .settings import BridgeSettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "BridgeSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
