"""The ``inventory-report`` group and its global options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from inventory_report import __init__conf__

from .commands import cli_config, cli_info, cli_report
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences

if TYPE_CHECKING:
    from inventory_report.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full Python traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    help="Read configuration files from profile/<NAME>/ (e.g. 'warehouse-east')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Set one configuration value for this run; repeatable",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and logging once, before any subcommand runs.

    ``ctx.obj`` arrives as a zero-argument services factory and leaves as
    the :class:`CLIContext` subcommands read.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli, ["--help"])
        >>> result.exit_code, "report" in result.output
        (0, True)
    """
    if not callable(ctx.obj):
        raise RuntimeError("the root group needs a services factory as ctx.obj")
    services: AppServices = ctx.obj()
    apply_traceback_preferences(traceback)
    state = CLIContext.load(services, profile=profile, set_overrides=set_overrides, traceback=traceback)
    services.init_logging(state.config)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(cli_info)
cli.add_command(cli_config)
cli.add_command(cli_report)


__all__ = ["cli"]
