"""Pipeline states and runtime record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from devkick.project import ProjectSpec, StepResult


class PipelineState(Enum):
    """States of a provisioning run, in transition order."""

    PROBING = "probing"
    RESOLVING_VERSION = "resolving_version"
    BUILDING_SKELETON = "building_skeleton"
    RENDERING_ARTIFACTS = "rendering_artifacts"
    INSTALLING_DEPENDENCIES = "installing_dependencies"
    DONE = "done"
    FAILED = "failed"


STEP_LABELS: dict[PipelineState, str] = {
    PipelineState.PROBING: "Checking required tools",
    PipelineState.RESOLVING_VERSION: "Resolving Python version",
    PipelineState.BUILDING_SKELETON: "Creating project skeleton",
    PipelineState.RENDERING_ARTIFACTS: "Writing project files",
    PipelineState.INSTALLING_DEPENDENCIES: "Installing dependencies",
}


@dataclass
class ProvisionRun:
    """Runtime state for one provisioning invocation.

    ``spec`` stays None until the runtime version has been resolved.
    """

    name: str
    root_path: Path
    state: PipelineState = PipelineState.PROBING
    spec: ProjectSpec | None = None
    results: list[StepResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    failed_step: PipelineState | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE

    def fail(self, step: PipelineState, error: Exception) -> None:
        """Record ``error`` against ``step`` and move to FAILED."""
        self.failed_step = step
        self.error = error
        self.results.append(
            StepResult(step=step.value, success=False, message=str(error))
        )
        self.state = PipelineState.FAILED
