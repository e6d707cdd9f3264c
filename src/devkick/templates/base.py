"""Base artifact template definition."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ArtifactTemplate:
    """A static file written into the new project.

    ``placeholders`` maps a literal token in ``content`` to the name of the
    ProjectSpec field that replaces it.
    """

    relative_path: Path
    content: str
    placeholders: dict[str, str] = field(default_factory=dict)
    supersedes: bool = False  # may replace an earlier revision of the same file
