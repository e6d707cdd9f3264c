"""Shared fixtures: a fake toolchain standing in for subprocess.run."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

POETRY_INIT_MANIFEST = """\
[tool.poetry]
name = "{name}"
version = "0.1.0"
description = ""
authors = ["Test <test@example.com>"]
readme = "README.md"

[tool.poetry.dependencies]
python = "{python}"

[build-system]
requires = ["poetry-core"]
build-backend = "poetry.core.masonry.api"
"""


class FakeToolchain:
    """Answers pyenv/poetry/direnv/git/python invocations without running them."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path | None]] = []
        self.missing: set[str] = set()
        self.failing: set[tuple[str, ...]] = set()
        self.python_stdout = "Python 3.11.4\n"
        self.python_stderr = ""
        self.installed_versions = ["3.10.12", "3.12.1"]

    @property
    def commands(self) -> list[str]:
        return [" ".join(args) for args, _ in self.calls]

    def __call__(
        self,
        args: list[str],
        cwd: Path | None = None,
        capture_output: bool = False,
        text: bool = False,
        errors: str | None = None,
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append((list(args), cwd))
        if args[0] in self.missing:
            raise FileNotFoundError(args[0])
        for prefix in self.failing:
            if tuple(args[: len(prefix)]) == prefix:
                return subprocess.CompletedProcess(args, 1, "", f"{args[0]}: boom\n")

        stdout = ""
        stderr = ""
        head = tuple(args[:2])
        if head == ("python", "--version"):
            stdout, stderr = self.python_stdout, self.python_stderr
        elif head == ("pyenv", "versions"):
            stdout = "".join(f"{v}\n" for v in self.installed_versions)
        elif head == ("pyenv", "install"):
            self.installed_versions.append(args[2])
        elif head == ("git", "init"):
            (Path(cwd) / ".git").mkdir()
        elif head == ("poetry", "init"):
            name = args[args.index("--name") + 1]
            python = next(a for a in args if a.startswith("--python=")).split("=", 1)[1]
            (Path(cwd) / "pyproject.toml").write_text(
                POETRY_INIT_MANIFEST.format(name=name, python=python)
            )
        elif head == ("poetry", "export"):
            Path(args[args.index("-o") + 1]).write_text("requests==2.32.3\n")
        return subprocess.CompletedProcess(args, 0, stdout, stderr)


@pytest.fixture
def toolchain():
    """Patch subprocess in devkick.shell with a FakeToolchain."""
    fake = FakeToolchain()
    with patch("devkick.shell.subprocess") as mock:
        mock.run.side_effect = fake
        yield fake


@pytest.fixture(autouse=True)
def _no_author_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEVKICK_AUTHOR", raising=False)
