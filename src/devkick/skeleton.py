"""Project directory skeleton creation."""

from __future__ import annotations

import logging
from pathlib import Path

from devkick.errors import DevkickError, TargetAlreadyExistsError
from devkick.project import StepResult
from devkick.shell import run_command

logger = logging.getLogger(__name__)

SOURCE_DIR = "app"
TESTS_DIR = "tests"
CI_DIR = Path(".github") / "workflows"


class SkeletonBuilder:
    """Creates the project root, its fixed subdirectories and a git repository."""

    def build(self, root: Path) -> StepResult:
        """Create the skeleton under ``root``.

        Never merges into an existing path. Returns the result of
        ``git init``, which does not stop the pipeline when it fails.

        Raises:
            TargetAlreadyExistsError: If ``root`` already exists.
        """
        if root.exists():
            raise TargetAlreadyExistsError(root)

        # exist_ok=False closes the gap between the check and the mkdir.
        try:
            root.mkdir()
        except FileExistsError as e:
            raise TargetAlreadyExistsError(root) from e
        logger.info("Created project directory %s", root)

        vcs_result = self.init_repository(root)

        (root / SOURCE_DIR).mkdir()
        (root / TESTS_DIR).mkdir()
        (root / CI_DIR).mkdir(parents=True, exist_ok=True)

        return vcs_result

    @staticmethod
    def init_repository(root: Path) -> StepResult:
        """Run ``git init`` in ``root``."""
        try:
            run_command(["git", "init"], cwd=root)
        except DevkickError as e:
            logger.warning("git init failed in %s: %s", root, e)
            return StepResult(step="git init", success=False, message=str(e))
        return StepResult(
            step="git init", success=True, message="Initialized empty git repository"
        )
