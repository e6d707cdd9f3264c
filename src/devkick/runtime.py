"""Runtime version detection, installation and pinning via pyenv."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from devkick.console import console
from devkick.errors import MissingToolError, NoActiveRuntimeError
from devkick.shell import run_command

logger = logging.getLogger(__name__)

PIN_FILENAME = ".python-version"


def parse_version_output(output: str) -> str | None:
    """Return the second whitespace-delimited field of the first line.

    ``"Python 3.11.4"`` gives ``"3.11.4"``. Returns None when there is
    nothing to parse.
    """
    lines = output.strip().splitlines()
    if not lines:
        return None
    parts = lines[0].split()
    if len(parts) < 2:
        return None
    return parts[1]


class VersionResolver:
    """Resolves the host's active Python version and provisions it with pyenv."""

    def __init__(
        self,
        runtime_command: Sequence[str] = ("python", "--version"),
        version_manager: str = "pyenv",
    ) -> None:
        self._runtime_command = tuple(runtime_command)
        self._version_manager = version_manager

    def resolve(self) -> str:
        """Detect the active runtime version.

        Raises:
            NoActiveRuntimeError: If the version command is missing or prints nothing usable.
        """
        try:
            result = run_command(self._runtime_command, check=False)
        except MissingToolError as e:
            raise NoActiveRuntimeError(
                "No active Python version found on the system. "
                "Please ensure Python is installed."
            ) from e

        # Python 2 reports its version on stderr.
        output = result.stdout if result.stdout.strip() else result.stderr
        version = parse_version_output(output)
        # Shim errors such as "pyenv: python: command not found" carry no digits.
        if version is None or not any(ch.isdigit() for ch in version):
            raise NoActiveRuntimeError(
                "No active Python version found on the system. "
                "Please ensure Python is installed."
            )
        logger.info("Detected active Python version %s", version)
        return version

    def installed_versions(self) -> list[str]:
        """List versions known to the version manager."""
        result = run_command([self._version_manager, "versions", "--bare"])
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def ensure_installed(self, version: str) -> bool:
        """Install ``version`` unless the version manager already has it.

        Membership is exact string equality. Returns True if an install ran.
        """
        if version in self.installed_versions():
            console.print(f"[green]✓[/green] Python {version} already installed.")
            return False

        console.print(f"Installing Python {version} via {self._version_manager}...")
        logger.info("Installing Python %s", version)
        run_command([self._version_manager, "install", version], capture=False)
        return True

    def pin(self, version: str, root: Path) -> Path:
        """Pin ``version`` for the project directory, never globally."""
        pin_file = root / PIN_FILENAME
        pin_file.write_text(f"{version}\n", encoding="utf-8")
        run_command([self._version_manager, "local", version], cwd=root)
        logger.debug("Pinned Python %s in %s", version, root)
        return pin_file
