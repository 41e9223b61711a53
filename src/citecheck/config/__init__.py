"""Configuration module for citecheck."""

from citecheck.config.factory import create_from_config
from citecheck.config.loader import get_default_config_path, load_config, load_default_config
from citecheck.config.models import CiteCheckConfig, GatewayConfig, LoggingConfig, SessionConfig

__all__ = [
    "CiteCheckConfig",
    "GatewayConfig",
    "LoggingConfig",
    "SessionConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
    "load_default_config",
]
