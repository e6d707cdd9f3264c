"""Exceptions raised while provisioning a project."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class DevkickError(Exception):
    """Base exception for devkick failures."""


class MissingToolError(DevkickError):
    """Raised when a required external tool is not on PATH."""

    def __init__(self, tool: str, hint: str | None = None) -> None:
        self.tool = tool
        self.hint = hint
        message = f"{tool} not found. Install it first."
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class NoActiveRuntimeError(DevkickError):
    """Raised when no active Python version can be detected on the host."""


class TargetAlreadyExistsError(DevkickError):
    """Raised when the project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Project directory '{path}' already exists. Aborting to avoid overwrite."
        )


class SubprocessFailureError(DevkickError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(
        self, command: Sequence[str], returncode: int, stderr: str = ""
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"'{' '.join(self.command)}' exited with status {returncode}"
        detail = stderr.strip().splitlines()
        if detail:
            message += f": {detail[-1]}"
        super().__init__(message)


class ArtifactConflictError(DevkickError):
    """Raised when a file is rendered twice in one run without superseding."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Artifact already written in this run: {path}")


class InvalidProjectNameError(DevkickError):
    """Raised when a project name cannot be used as a directory name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"'{name}' is not a valid project name")
