"""Configuration models and loaders for dsmeta."""

from .loader import ConfigError, ENV_OVERRIDES, dump_example_config, load_config
from .models import DataSetsConfig, DsMetaConfig, ResourcesConfig

__all__ = [
    "ConfigError",
    "DataSetsConfig",
    "DsMetaConfig",
    "ENV_OVERRIDES",
    "ResourcesConfig",
    "dump_example_config",
    "load_config",
]
