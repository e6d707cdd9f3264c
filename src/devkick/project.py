"""Data shared by the provisioning steps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from devkick.errors import InvalidProjectNameError


def validate_project_name(name: str) -> str:
    """Return ``name`` if it names a single new directory.

    Raises:
        InvalidProjectNameError: For empty names, "." or "..", or names with a "/".
    """
    if not name.strip() or "/" in name or name in (".", ".."):
        raise InvalidProjectNameError(name)
    return name


@dataclass(frozen=True)
class ProjectSpec:
    """Immutable description of the project being scaffolded.

    Created once, after the runtime version is known, and passed read-only
    to every later step.
    """

    name: str
    runtime_version: str
    root_path: Path
    author: str
    year: int
    ci_branch: str = "main"

    def __post_init__(self) -> None:
        validate_project_name(self.name)


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single provisioning step."""

    step: str
    success: bool
    message: str = ""
