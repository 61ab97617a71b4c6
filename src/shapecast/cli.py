"""Entry point of the ``shapecast`` command."""

from __future__ import annotations

import click

from shapecast import __version__
from shapecast.commands._context import AppContext
from shapecast.commands.defaults import defaults
from shapecast.commands.repair import repair
from shapecast.config.settings import ShapecastSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-V", "--version", prog_name="shapecast")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Log as JSON lines instead of console text.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of discovering shapecast.toml.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_json: bool, config_path: str | None) -> None:
    """Repair untrusted JSON into a known shape.

    Validators are named by import reference, e.g.
    ``shapecast.examples:preferences``.
    """
    settings = ShapecastSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(repair)
cli.add_command(defaults)
