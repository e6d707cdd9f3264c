"""Configuration file loading and merging."""

import logging
import os
from pathlib import Path

import yaml

from devkick.config.schema import DEFAULT_CONFIG, DevkickConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
AUTHOR_ENV_VAR = "DEVKICK_AUTHOR"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.devkick/config.yaml."""
    return Path.home() / ".devkick" / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.devkick/config.yaml."""
    return Path.cwd() / ".devkick" / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found or empty."""
    if not path.exists():
        return None
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError:
        logger.warning("Ignoring invalid config file: %s", path)
        return None
    if not isinstance(data, dict):
        return None
    result: dict[str, object] = data
    return result


def load_config() -> DevkickConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.devkick/config.yaml)
    3. Local config (./.devkick/config.yaml)
    """
    config = DEFAULT_CONFIG

    for path in (get_home_config_path(), get_local_config_path()):
        data = load_yaml_config(path)
        if data:
            logger.debug("Loaded config from %s", path)
            config = config.merge(DevkickConfig.from_dict(data))

    return config


def resolve_author(config: DevkickConfig, project_name: str) -> str:
    """Resolve the copyright holder named in the LICENSE.

    Precedence: DEVKICK_AUTHOR env var, then config, then a generic
    "The <project> authors".
    """
    author = os.environ.get(AUTHOR_ENV_VAR) or config.author
    if author:
        return author
    return f"The {project_name} authors"
