"""Command-line interface for devkick."""

import logging

import click
from rich.logging import RichHandler
from rich.markup import escape

from devkick import __version__
from devkick.config import load_config
from devkick.console import console, err_console
from devkick.errors import InvalidProjectNameError
from devkick.pipeline import STEP_LABELS, provision
from devkick.project import validate_project_name
from devkick.tools import REQUIRED_TOOLS, report

logger = logging.getLogger(__name__)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"devkick [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _validate_name(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    if value is None:
        return None
    try:
        return validate_project_name(value)
    except InvalidProjectNameError as e:
        raise click.BadParameter(str(e)) from e


@click.command()
@click.argument("name", required=False, callback=_validate_name)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Only check that pyenv, poetry and direnv are installed.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(name: str | None, check: bool, verbose: bool) -> None:
    """Kick off a new Python project called NAME (default: devkick).

    Creates NAME/ with a pyenv-pinned Python, a poetry project, direnv
    config, a Makefile and a GitHub Actions workflow.
    """
    _configure_logging(verbose)

    if check:
        if not report(REQUIRED_TOOLS):
            raise SystemExit(1)
        return

    config = load_config()
    project_name = name or config.default_name or "devkick"
    logger.debug("Provisioning project %s", project_name)

    run = provision(project_name, config=config)

    if not run.succeeded:
        label = STEP_LABELS.get(run.failed_step, "Provisioning")
        err_console.print(
            f"[red]✗[/red] {label} failed: {escape(str(run.error))}", soft_wrap=True
        )
        raise SystemExit(1)

    console.print(f"[bold green]✓ Project '{project_name}' setup complete![/bold green]")
    console.print(f"\n  cd {project_name}\n  make setup\n  make run")
