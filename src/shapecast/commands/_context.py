"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Resolves validator references and renders output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from shapecast.domain.errors import SchemaError
from shapecast.loading import load_validator
from shapecast.output.formatters import to_json

if TYPE_CHECKING:
    from shapecast.config.settings import ShapecastSettings
    from shapecast.domain.types import Validator


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShapecastSettings) -> None:
        self.settings = settings

        from shapecast.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def validator(self, reference: str) -> Validator[Any]:
        """Load the validator named by *reference* or fail the command."""
        try:
            return load_validator(reference)
        except SchemaError as exc:
            raise click.ClickException(str(exc)) from exc

    def emit(
        self,
        value: Any,
        *,
        indent: int | None = None,
        sort_keys: bool | None = None,
    ) -> None:
        """Write *value* as JSON to stdout.

        Explicit arguments override the ``[output]`` settings.
        """
        output = self.settings.output
        text = to_json(
            value,
            indent=output.indent if indent is None else indent,
            sort_keys=output.sort_keys if sort_keys is None else sort_keys,
            ensure_ascii=output.ensure_ascii,
        )
        click.echo(text)
