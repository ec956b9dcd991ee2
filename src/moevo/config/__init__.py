"""Convenience exports for the configuration package."""

from .loader import ConfigError, load_config, save_config
from .logging_conf import JSONFormatter, configure_logging
from .schemas import DEFAULT_DISTRIBUTION_INDEX, MutationConfig, VariationRunConfig
from .settings import ENV_PREFIX, Settings, get_settings, reset_settings_cache

__all__ = [
    "ConfigError",
    "load_config",
    "save_config",
    "JSONFormatter",
    "configure_logging",
    "DEFAULT_DISTRIBUTION_INDEX",
    "MutationConfig",
    "VariationRunConfig",
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
