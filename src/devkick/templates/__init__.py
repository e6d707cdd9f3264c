"""Project file templates and rendering."""

from devkick.templates.base import ArtifactTemplate
from devkick.templates.catalog import CATALOG
from devkick.templates.renderer import ArtifactRenderer, amend_manifest_text, render

__all__ = [
    "ArtifactRenderer",
    "ArtifactTemplate",
    "CATALOG",
    "amend_manifest_text",
    "render",
]
