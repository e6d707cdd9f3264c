"""direnv environment loader requirement."""

from devkick.tools.base import ToolRequirement

DIRENV = ToolRequirement(
    name="direnv",
    detect_command=("direnv", "version"),
    install_hint="https://direnv.net/",
)
