"""Provisioning pipeline."""

from devkick.pipeline.base import STEP_LABELS, PipelineState, ProvisionRun
from devkick.pipeline.orchestrator import Orchestrator, provision

__all__ = [
    "STEP_LABELS",
    "Orchestrator",
    "PipelineState",
    "ProvisionRun",
    "provision",
]
