"""Configuration structures and loading for statuscli."""

import os
import tomllib
from pathlib import Path

import msgspec
import tomli_w


# Default values
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_MAX_RETRIES = 0
DEFAULT_SERVICE = "github"

_TRUTHY = {"1", "true", "yes", "on"}


# Fetch configuration
class FetchConfig(msgspec.Struct, omit_defaults=True):
    """Request pipeline settings."""

    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    debug: bool = False


# Display configuration
class DisplayConfig(msgspec.Struct, omit_defaults=True):
    """Display settings."""

    color: bool = True


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    default_service: str = DEFAULT_SERVICE
    fetch: FetchConfig = msgspec.field(default_factory=FetchConfig)
    display: DisplayConfig = msgspec.field(default_factory=DisplayConfig)
    # Extra or overriding catalog entries: name -> status.json URL
    services: dict[str, str] = msgspec.field(default_factory=dict)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def _save_to_toml(data: dict, path: Path) -> None:
    """Save configuration to TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    return msgspec.convert(data, type=Config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    STATUSCLI_TIMEOUT: Per-attempt timeout in seconds
    STATUSCLI_MAX_RETRIES: Retry count for transient failures
    STATUSCLI_DEBUG: Log the final response of every request
    STATUSCLI_NO_COLOR: Disable colored output
    """
    fetch = config.fetch

    if "STATUSCLI_TIMEOUT" in os.environ:
        fetch = msgspec.structs.replace(
            fetch, timeout=float(os.environ["STATUSCLI_TIMEOUT"])
        )

    if "STATUSCLI_MAX_RETRIES" in os.environ:
        fetch = msgspec.structs.replace(
            fetch, max_retries=int(os.environ["STATUSCLI_MAX_RETRIES"])
        )

    if "STATUSCLI_DEBUG" in os.environ:
        debug = os.environ["STATUSCLI_DEBUG"].strip().lower() in _TRUTHY
        fetch = msgspec.structs.replace(fetch, debug=debug)

    config = msgspec.structs.replace(config, fetch=fetch)

    if "STATUSCLI_NO_COLOR" in os.environ:
        display = msgspec.structs.replace(config.display, color=False)
        config = msgspec.structs.replace(config, display=display)

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        config = Config()
    else:
        config = convert_config(raw_data)

    return _apply_env_overrides(config)


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    from .paths import config_file

    config_path = path or config_file()

    _save_to_toml(msgspec.to_builtins(config), config_path)

    # Update singleton
    global _config
    _config = config
