"""Presence checks for required external tools."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from devkick.console import console
from devkick.errors import MissingToolError
from devkick.shell import run_command
from devkick.tools.base import ToolRequirement

logger = logging.getLogger(__name__)


def check_available(requirement: ToolRequirement) -> bool:
    """Run the requirement's detect command and report success by exit status."""
    try:
        result = run_command(requirement.detect_command, check=False)
    except MissingToolError:
        return False
    return result.ok


def probe_all(requirements: Iterable[ToolRequirement]) -> None:
    """Check every requirement, stopping at the first missing tool.

    Raises:
        MissingToolError: Naming the first tool that is not available.
    """
    for requirement in requirements:
        if not check_available(requirement):
            logger.info("Required tool missing: %s", requirement.name)
            raise MissingToolError(requirement.name, requirement.install_hint)
        logger.debug("Found %s", requirement.name)


def report(requirements: Iterable[ToolRequirement]) -> bool:
    """Print availability of each requirement. Returns True if all are present."""
    console.print("[bold]Required tools:[/bold]")
    all_present = True
    for requirement in requirements:
        if check_available(requirement):
            console.print(
                f"  [green]✓[/green] {requirement.name} "
                f"([cyan]{requirement.cli_command}[/cyan])"
            )
        else:
            all_present = False
            console.print(
                f"  [red]✗[/red] {requirement.name} - "
                f"[dim]{requirement.install_hint}[/dim]"
            )
    return all_present
