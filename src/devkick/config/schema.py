"""Configuration schema for devkick."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, fields
from typing import Any


def _str_tuple(value: Any) -> tuple[str, ...] | None:
    """Coerce a YAML list, or a shell-style string, into a tuple of strings."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return tuple(shlex.split(value))
        except ValueError:
            return None
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    return None


@dataclass(frozen=True)
class DevkickConfig:
    """devkick configuration schema.

    None values indicate "not set" and are inherited when merging.
    """

    # Project settings
    default_name: str | None = None
    author: str | None = None

    # Runtime detection
    runtime_command: tuple[str, ...] | None = None

    # Dependencies registered with the package manager
    dependencies: tuple[str, ...] | None = None
    dev_dependencies: tuple[str, ...] | None = None
    dev_group: str | None = None

    # CI workflow
    ci_branch: str | None = None

    def merge(self, other: DevkickConfig) -> DevkickConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new DevkickConfig instance.
        """
        values = {}
        for f in fields(self):
            theirs = getattr(other, f.name)
            values[f.name] = theirs if theirs is not None else getattr(self, f.name)
        return DevkickConfig(**values)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DevkickConfig:
        """Create a DevkickConfig from a dictionary.

        Unknown keys are ignored.
        """
        default_name = data.get("default_name")
        author = data.get("author")
        dev_group = data.get("dev_group")
        ci_branch = data.get("ci_branch")
        return cls(
            default_name=str(default_name) if default_name else None,
            author=str(author) if author else None,
            runtime_command=_str_tuple(data.get("runtime_command")) or None,
            dependencies=_str_tuple(data.get("dependencies")),
            dev_dependencies=_str_tuple(data.get("dev_dependencies")),
            dev_group=str(dev_group) if dev_group else None,
            ci_branch=str(ci_branch) if ci_branch else None,
        )


DEFAULT_PROJECT_NAME = "devkick"

# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = DevkickConfig(
    default_name=DEFAULT_PROJECT_NAME,
    runtime_command=("python", "--version"),
    dependencies=("requests",),
    dev_dependencies=("black", "pytest", "coverage"),
    dev_group="dev",
    ci_branch="main",
)
