"""Dependency registration and lockfile export via poetry."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from devkick.console import console
from devkick.project import ProjectSpec
from devkick.shell import run_command

logger = logging.getLogger(__name__)

DEFAULT_DEPENDENCIES: tuple[str, ...] = ("requests",)
DEFAULT_DEV_DEPENDENCIES: tuple[str, ...] = ("black", "pytest", "coverage")


class DependencyInstaller:
    """Drives the package manager inside the project directory.

    Every call is a separate blocking subprocess; any non-zero exit raises
    SubprocessFailureError and stops provisioning.
    """

    def __init__(
        self,
        spec: ProjectSpec,
        dependencies: Sequence[str] = DEFAULT_DEPENDENCIES,
        dev_dependencies: Sequence[str] = DEFAULT_DEV_DEPENDENCIES,
        dev_group: str = "dev",
        package_manager: str = "poetry",
    ) -> None:
        self._spec = spec
        self._dependencies = tuple(dependencies)
        self._dev_dependencies = tuple(dev_dependencies)
        self._dev_group = dev_group
        self._package_manager = package_manager

    def init_manifest(self) -> Path:
        """Create pyproject.toml with the package manager."""
        run_command(
            [
                self._package_manager,
                "init",
                "--name",
                self._spec.name,
                f"--python={self._spec.runtime_version}",
                "--no-interaction",
            ],
            cwd=self._spec.root_path,
        )
        return self._spec.root_path / "pyproject.toml"

    def register_dependency(self, name: str, group: str | None = None) -> None:
        """Add a single dependency, optionally to a named group."""
        cmd = [self._package_manager, "add"]
        if group:
            cmd.extend(["--group", group])
        cmd.append(name)
        logger.info("Adding %s%s", name, f" ({group})" if group else "")
        run_command(cmd, cwd=self._spec.root_path)

    def register_all(self) -> list[str]:
        """Register runtime dependencies, then the development group.

        Returns:
            Names registered, in order.
        """
        registered: list[str] = []
        for name in self._dependencies:
            self.register_dependency(name)
            registered.append(name)
        for name in self._dev_dependencies:
            self.register_dependency(name, self._dev_group)
            registered.append(name)
        console.print(f"[green]✓[/green] Added {len(registered)} dependencies")
        return registered

    def export_lockfile(
        self,
        fmt: str = "requirements.txt",
        destination: Path | None = None,
    ) -> Path:
        """Export the locked dependencies as a hash-free plain-text manifest."""
        target = destination or self._spec.root_path / "requirements.txt"
        run_command(
            [
                self._package_manager,
                "export",
                "--without-hashes",
                "-f",
                fmt,
                "-o",
                str(target),
            ],
            cwd=self._spec.root_path,
        )
        return target
