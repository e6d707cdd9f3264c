"""Rendering of catalog templates into the project directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from devkick.errors import ArtifactConflictError
from devkick.project import ProjectSpec
from devkick.templates.base import ArtifactTemplate
from devkick.templates.catalog import CATALOG

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "pyproject.toml"
POETRY_TABLE = "[tool.poetry]"


def render(template: ArtifactTemplate, spec: ProjectSpec) -> str:
    """Substitute ProjectSpec fields into the template's tokens.

    Plain string replacement: values are embedded verbatim.
    """
    text = template.content
    for token, field_name in template.placeholders.items():
        text = text.replace(token, str(getattr(spec, field_name)))
    return text


def packaging_stanza(spec: ProjectSpec) -> str:
    return f'packages = [{{ include = "{spec.name}" }}]'


def amend_manifest_text(manifest: str, spec: ProjectSpec) -> str:
    """Add the packaging stanza to pyproject.toml text.

    Goes directly under an existing ``[tool.poetry]`` table so the table is
    never declared twice; otherwise a new table is appended.
    """
    stanza = packaging_stanza(spec)
    lines = manifest.splitlines()
    for index, line in enumerate(lines):
        if line.strip() == POETRY_TABLE:
            lines.insert(index + 1, stanza)
            return "\n".join(lines) + "\n"

    text = manifest
    if text and not text.endswith("\n"):
        text += "\n"
    return f"{text}{POETRY_TABLE}\n{stanza}\n"


def atomic_write(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` so readers see old or new content, never partial."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(f".{path.name}.devkick-tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


class ArtifactRenderer:
    """Writes rendered templates under the project root.

    Each path is written once per run; a template flagged ``supersedes``
    may replace the earlier revision of its file.
    """

    def __init__(self, spec: ProjectSpec) -> None:
        self._spec = spec
        self._written: set[Path] = set()

    @property
    def written(self) -> frozenset[Path]:
        return frozenset(self._written)

    def _claim(self, relative_path: Path, supersedes: bool = False) -> Path:
        if relative_path in self._written and not supersedes:
            raise ArtifactConflictError(relative_path)
        self._written.add(relative_path)
        return self._spec.root_path / relative_path

    def write(self, template: ArtifactTemplate) -> Path:
        """Render one template and write it atomically."""
        path = self._claim(template.relative_path, template.supersedes)
        atomic_write(path, render(template, self._spec))
        logger.debug("Wrote %s", template.relative_path)
        return path

    def render_all(self, catalog: Iterable[ArtifactTemplate] = CATALOG) -> list[Path]:
        """Write every catalog entry in order."""
        return [self.write(template) for template in catalog]

    def amend_manifest(self) -> Path:
        """Add the packaging stanza to the manifest created by the package manager."""
        relative = Path(MANIFEST_FILENAME)
        path = self._claim(relative)
        manifest = path.read_text(encoding="utf-8") if path.exists() else ""
        atomic_write(path, amend_manifest_text(manifest, self._spec))
        logger.debug("Added packaging stanza to %s", relative)
        return path
