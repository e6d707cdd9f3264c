"""Poetry package manager requirement."""

from devkick.tools.base import ToolRequirement

POETRY = ToolRequirement(
    name="poetry",
    detect_command=("poetry", "--version"),
    install_hint="https://python-poetry.org/docs/#installation",
)
