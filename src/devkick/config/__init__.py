"""Configuration loading."""

from devkick.config.loader import load_config, resolve_author
from devkick.config.schema import DEFAULT_CONFIG, DEFAULT_PROJECT_NAME, DevkickConfig

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PROJECT_NAME",
    "DevkickConfig",
    "load_config",
    "resolve_author",
]
