"""direnv integration."""

import logging
from pathlib import Path

from devkick.shell import run_command

logger = logging.getLogger(__name__)


def allow_envrc(root: Path, env_loader: str = "direnv") -> None:
    """Approve the project's .envrc so direnv loads it automatically."""
    run_command([env_loader, "allow"], cwd=root)
    logger.debug("Allowed .envrc in %s", root)
