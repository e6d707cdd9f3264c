"""pyenv version manager requirement."""

from devkick.tools.base import ToolRequirement

PYENV = ToolRequirement(
    name="pyenv",
    detect_command=("pyenv", "--version"),
    install_hint="https://github.com/pyenv/pyenv",
)
