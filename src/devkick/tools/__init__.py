"""External tool requirements and detection."""

from devkick.tools.base import ToolRequirement
from devkick.tools.direnv import DIRENV
from devkick.tools.poetry import POETRY
from devkick.tools.probe import check_available, probe_all, report
from devkick.tools.pyenv import PYENV

__all__ = [
    "ToolRequirement",
    "REQUIRED_TOOLS",
    "DIRENV",
    "POETRY",
    "PYENV",
    "check_available",
    "probe_all",
    "report",
]

# Probe order matches the order tools are needed in.
REQUIRED_TOOLS: tuple[ToolRequirement, ...] = (
    PYENV,
    POETRY,
    DIRENV,
)
