"""Tests for artifact templates and rendering."""

from pathlib import Path

import pytest

from devkick.errors import ArtifactConflictError
from devkick.project import ProjectSpec
from devkick.templates import (
    CATALOG,
    ArtifactRenderer,
    ArtifactTemplate,
    amend_manifest_text,
    render,
)
from devkick.templates.catalog import README_FULL, README_STUB


def _make_spec(root: Path, name: str = "demo", version: str = "3.11.4") -> ProjectSpec:
    return ProjectSpec(
        name=name,
        runtime_version=version,
        root_path=root,
        author="Jane Doe",
        year=2025,
    )


class TestRender:
    """Tests for render()."""

    def test_substitutes_tokens(self, tmp_path: Path) -> None:
        """Test that every token occurrence is replaced."""
        template = ArtifactTemplate(
            Path("x.txt"),
            "{{name}} on {{runtime_version}} / {{name}}",
            {"{{name}}": "name", "{{runtime_version}}": "runtime_version"},
        )
        assert render(template, _make_spec(tmp_path)) == "demo on 3.11.4 / demo"

    def test_values_embedded_verbatim(self, tmp_path: Path) -> None:
        """Test that values are embedded without escaping."""
        template = ArtifactTemplate(Path("x"), "[{{name}}]", {"{{name}}": "name"})
        spec = _make_spec(tmp_path, name="a{{b}}$HOME")
        assert render(template, spec) == "[a{{b}}$HOME]"

    def test_unmapped_tokens_untouched(self, tmp_path: Path) -> None:
        """Test that tokens without a mapping stay as-is."""
        template = ArtifactTemplate(Path("x"), "{{name}}")
        assert render(template, _make_spec(tmp_path)) == "{{name}}"

    def test_catalog_leaves_no_tokens(self, tmp_path: Path) -> None:
        """Test that no catalog entry leaves a token behind."""
        spec = _make_spec(tmp_path)
        for template in CATALOG:
            assert "{{" not in render(template, spec), template.relative_path

    def test_main_prints_project_name(self, tmp_path: Path) -> None:
        """Test that app/main.py greets the project by name."""
        main_py = next(t for t in CATALOG if t.relative_path == Path("app/main.py"))
        assert 'print("Hello from demo!")' in render(main_py, _make_spec(tmp_path))

    def test_workflow_embeds_version(self, tmp_path: Path) -> None:
        """Test that the workflow pins the runtime version and branch."""
        workflow = next(t for t in CATALOG if t.relative_path.suffix == ".yml")
        text = render(workflow, _make_spec(tmp_path))
        assert 'python-version: "3.11.4"' in text
        assert "branches: [ main ]" in text

    def test_makefile_uses_tabs(self, tmp_path: Path) -> None:
        """Test that every Makefile target has a tab-indented recipe."""
        makefile = next(t for t in CATALOG if t.relative_path == Path("Makefile"))
        text = render(makefile, _make_spec(tmp_path))
        for target in ("setup", "run", "test", "lint", "coverage"):
            assert f"\n{target}:\n\t" in text

    def test_license_names_author_and_year(self, tmp_path: Path) -> None:
        """Test the LICENSE copyright line."""
        license_ = next(t for t in CATALOG if t.relative_path == Path("LICENSE"))
        assert "Copyright (c) 2025 Jane Doe" in render(license_, _make_spec(tmp_path))


class TestAmendManifest:
    """Tests for amend_manifest_text()."""

    def test_inserts_under_existing_table(self, tmp_path: Path) -> None:
        """Test that the stanza goes under an existing [tool.poetry]."""
        manifest = '[tool.poetry]\nname = "demo"\n\n[build-system]\n'
        text = amend_manifest_text(manifest, _make_spec(tmp_path))
        assert text.count("[tool.poetry]") == 1
        assert text.startswith('[tool.poetry]\npackages = [{ include = "demo" }]\n')

    def test_appends_table_when_absent(self, tmp_path: Path) -> None:
        """Test that a [tool.poetry] table is appended when missing."""
        manifest = '[project]\nname = "demo"'
        text = amend_manifest_text(manifest, _make_spec(tmp_path))
        assert text.endswith('\n[tool.poetry]\npackages = [{ include = "demo" }]\n')
        assert text.startswith('[project]\nname = "demo"\n')

    def test_empty_manifest(self, tmp_path: Path) -> None:
        """Test amending an empty manifest."""
        text = amend_manifest_text("", _make_spec(tmp_path))
        assert text == '[tool.poetry]\npackages = [{ include = "demo" }]\n'


class TestArtifactRenderer:
    """Tests for ArtifactRenderer writes."""

    def test_render_all_writes_catalog(self, tmp_path: Path) -> None:
        """Test that render_all writes every catalog file."""
        renderer = ArtifactRenderer(_make_spec(tmp_path))
        renderer.render_all()

        for relative in (
            ".gitignore",
            "README.md",
            "LICENSE",
            ".envrc",
            "Makefile",
            "app/main.py",
            "tests/test_dummy.py",
            ".github/workflows/python-app.yml",
        ):
            assert (tmp_path / relative).is_file(), relative
        assert (tmp_path / ".envrc").read_text() == "use poetry\n"
        assert not list(tmp_path.rglob("*.devkick-tmp"))

    def test_readme_final_content_is_full_revision(self, tmp_path: Path) -> None:
        """Test that the full README supersedes the stub."""
        spec = _make_spec(tmp_path)
        ArtifactRenderer(spec).render_all()

        readme = (tmp_path / "README.md").read_text(encoding="utf-8")
        assert readme == README_FULL.replace("{{name}}", "demo").replace(
            "{{runtime_version}}", "3.11.4"
        )
        assert readme != README_STUB.replace("{{name}}", "demo")

    def test_rendering_is_deterministic(self, tmp_path: Path) -> None:
        """Test that identical specs render identical bytes."""
        first, second = tmp_path / "one", tmp_path / "two"
        ArtifactRenderer(_make_spec(first)).render_all()
        ArtifactRenderer(_make_spec(second)).render_all()

        for path in first.rglob("*"):
            if path.is_file():
                assert path.read_bytes() == (second / path.relative_to(first)).read_bytes()

    def test_second_write_without_supersede_rejected(self, tmp_path: Path) -> None:
        """Test that a path is not rewritten without supersedes."""
        renderer = ArtifactRenderer(_make_spec(tmp_path))
        template = ArtifactTemplate(Path("notes.txt"), "one")
        renderer.write(template)
        with pytest.raises(ArtifactConflictError):
            renderer.write(ArtifactTemplate(Path("notes.txt"), "two"))
        assert (tmp_path / "notes.txt").read_text() == "one"

    def test_supersede_replaces_content(self, tmp_path: Path) -> None:
        """Test that a superseding template replaces the file."""
        renderer = ArtifactRenderer(_make_spec(tmp_path))
        renderer.write(ArtifactTemplate(Path("notes.txt"), "stub"))
        renderer.write(ArtifactTemplate(Path("notes.txt"), "full", supersedes=True))
        assert (tmp_path / "notes.txt").read_text() == "full"
        assert renderer.written == frozenset({Path("notes.txt")})

    def test_amend_manifest_file(self, tmp_path: Path) -> None:
        """Test amending pyproject.toml on disk, once."""
        (tmp_path / "pyproject.toml").write_text('[tool.poetry]\nname = "demo"\n')
        renderer = ArtifactRenderer(_make_spec(tmp_path))
        renderer.amend_manifest()
        text = (tmp_path / "pyproject.toml").read_text()
        assert 'packages = [{ include = "demo" }]' in text
        with pytest.raises(ArtifactConflictError):
            renderer.amend_manifest()
