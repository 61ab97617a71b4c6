"""Command: print the all-defaults instance of a shape."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapecast.commands._base import examples_option

if TYPE_CHECKING:
    from shapecast.commands._context import AppContext


@click.command()
@click.argument("target")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="JSON indent width.")
@examples_option(
    """
    shapecast defaults shapecast.examples:preferences
    shapecast defaults shapecast.examples:playlist --indent 4
    """
)
@click.pass_obj
def defaults(app: AppContext, target: str, indent: int | None) -> None:
    """Print what validator TARGET produces when given no data at all."""
    validate = app.validator(target)
    app.emit(validate(None), indent=indent)
