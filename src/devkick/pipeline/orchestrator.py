"""Provisioning orchestrator: sequential, fail-fast step execution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from rich.markup import escape

from devkick.config.loader import resolve_author
from devkick.config.schema import DEFAULT_CONFIG, DevkickConfig
from devkick.console import console
from devkick.dependencies import DependencyInstaller
from devkick.environment import allow_envrc
from devkick.errors import DevkickError
from devkick.pipeline.base import STEP_LABELS, PipelineState, ProvisionRun
from devkick.project import ProjectSpec, StepResult, validate_project_name
from devkick.runtime import VersionResolver
from devkick.skeleton import SkeletonBuilder
from devkick.templates import CATALOG, ArtifactRenderer
from devkick.tools import REQUIRED_TOOLS, ToolRequirement, probe_all

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs the provisioning steps in order and stops at the first failure.

    Nothing is rolled back: a failed scaffold stays on disk for inspection.
    """

    def __init__(
        self,
        name: str,
        parent: Path | None = None,
        config: DevkickConfig = DEFAULT_CONFIG,
        tools: Sequence[ToolRequirement] = REQUIRED_TOOLS,
        year: int | None = None,
    ) -> None:
        self._config = DEFAULT_CONFIG.merge(config)
        self._tools = tuple(tools)
        self._year = year or datetime.now(UTC).year
        self._resolver = VersionResolver(
            runtime_command=self._config.runtime_command or ("python", "--version")
        )
        self._builder = SkeletonBuilder()
        self.run_state = ProvisionRun(
            name=name, root_path=(parent or Path.cwd()) / name
        )

    def run(self) -> ProvisionRun:
        """Execute every step. Returns the run record, never raises DevkickError."""
        run = self.run_state
        stages: list[tuple[PipelineState, Callable[[ProvisionRun], str]]] = [
            (PipelineState.PROBING, self._probe),
            (PipelineState.RESOLVING_VERSION, self._resolve_version),
            (PipelineState.BUILDING_SKELETON, self._build_skeleton),
            (PipelineState.RENDERING_ARTIFACTS, self._render_artifacts),
            (PipelineState.INSTALLING_DEPENDENCIES, self._install_dependencies),
        ]

        for state, action in stages:
            run.state = state
            logger.info("Step: %s", state.value)
            console.print(f"[bold]{STEP_LABELS[state]}...[/bold]")
            try:
                message = action(run)
            except (DevkickError, OSError) as e:
                logger.info("Step %s failed: %s", state.value, e)
                run.fail(state, e)
                return run
            run.results.append(
                StepResult(step=state.value, success=True, message=message)
            )

        run.state = PipelineState.DONE
        return run

    def _probe(self, run: ProvisionRun) -> str:
        validate_project_name(run.name)
        probe_all(self._tools)
        return "All required tools found"

    def _resolve_version(self, run: ProvisionRun) -> str:
        version = self._resolver.resolve()
        console.print(f"Using system's active Python version: [cyan]{version}[/cyan]")
        installed = self._resolver.ensure_installed(version)
        run.spec = ProjectSpec(
            name=run.name,
            runtime_version=version,
            root_path=run.root_path,
            author=resolve_author(self._config, run.name),
            year=self._year,
            ci_branch=self._config.ci_branch or "main",
        )
        return f"Python {version} {'installed' if installed else 'already installed'}"

    def _build_skeleton(self, run: ProvisionRun) -> str:
        spec = _require_spec(run)
        vcs = self._builder.build(spec.root_path)
        if not vcs.success:
            run.warnings.append(f"{vcs.step}: {vcs.message}")
            console.print(
                f"[yellow]⚠[/yellow] {vcs.step} failed: {escape(vcs.message)}"
            )
        self._resolver.pin(spec.runtime_version, spec.root_path)
        return f"Created {spec.root_path}"

    def _render_artifacts(self, run: ProvisionRun) -> str:
        spec = _require_spec(run)
        renderer = ArtifactRenderer(spec)
        self._installer(spec).init_manifest()
        renderer.amend_manifest()
        renderer.render_all(CATALOG)
        allow_envrc(spec.root_path)
        return f"Wrote {len(renderer.written)} files"

    def _install_dependencies(self, run: ProvisionRun) -> str:
        spec = _require_spec(run)
        installer = self._installer(spec)
        registered = installer.register_all()
        installer.export_lockfile()
        return f"Registered {', '.join(registered)}"

    def _installer(self, spec: ProjectSpec) -> DependencyInstaller:
        return DependencyInstaller(
            spec,
            dependencies=self._config.dependencies or (),
            dev_dependencies=self._config.dev_dependencies or (),
            dev_group=self._config.dev_group or "dev",
        )


def _require_spec(run: ProvisionRun) -> ProjectSpec:
    if run.spec is None:
        raise RuntimeError("ProjectSpec is not available before version resolution")
    return run.spec


def provision(
    name: str,
    parent: Path | None = None,
    config: DevkickConfig = DEFAULT_CONFIG,
) -> ProvisionRun:
    """Scaffold project ``name`` under ``parent`` (defaults to cwd)."""
    return Orchestrator(name, parent=parent, config=config).run()
