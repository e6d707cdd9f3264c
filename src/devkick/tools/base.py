"""Base tool requirement definition."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolRequirement:
    """An external tool that must be installed before provisioning."""

    name: str
    detect_command: tuple[str, ...]
    install_hint: str

    @property
    def cli_command(self) -> str:
        """Executable looked up on PATH."""
        return self.detect_command[0]
