"""Blocking subprocess invocation of external tools."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from devkick.errors import MissingToolError, SubprocessFailureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished subprocess."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    args: Sequence[str],
    cwd: Path | None = None,
    capture: bool = True,
    check: bool = True,
) -> CommandResult:
    """Run a command and wait for it to exit.

    No timeout is applied. With ``capture=False`` the tool writes straight
    to the terminal, which is what long-running installs want. Undecodable
    bytes in the output are replaced rather than raised.

    Raises:
        MissingToolError: If the executable cannot be found.
        SubprocessFailureError: If ``check`` is set and the exit status is non-zero.
    """
    argv = tuple(str(a) for a in args)
    logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd)
    try:
        result = subprocess.run(
            list(argv),
            cwd=cwd,
            capture_output=capture,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        raise MissingToolError(argv[0]) from e

    outcome = CommandResult(
        args=argv,
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
    if check and not outcome.ok:
        raise SubprocessFailureError(argv, outcome.returncode, outcome.stderr)
    return outcome
