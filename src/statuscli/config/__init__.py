"""Configuration management for statuscli."""

from statuscli.config.paths import config_dir, config_file
from statuscli.config.settings import (
    Config,
    DisplayConfig,
    FetchConfig,
    get_config,
    load_config,
    reload_config,
    save_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    # settings
    "Config",
    "DisplayConfig",
    "FetchConfig",
    "get_config",
    "load_config",
    "reload_config",
    "save_config",
]
