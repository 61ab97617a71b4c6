"""Command: repair a JSON document into a known shape."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click
import structlog

from shapecast.commands._base import examples_option
from shapecast.loading import load_document

if TYPE_CHECKING:
    from shapecast.commands._context import AppContext

log = structlog.get_logger(__name__)

# Failures of decoding the bytes, parsing the text, or nesting past the
# interpreter's recursion limit.
DOCUMENT_ERRORS = (UnicodeDecodeError, json.JSONDecodeError, RecursionError)


@click.command()
@click.argument("target")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="JSON indent width.")
@click.option("--sort-keys", is_flag=True, help="Sort object keys in output.")
@examples_option(
    """
    shapecast repair shapecast.examples:preferences prefs.json
    echo '{"language": "italian"}' | shapecast repair shapecast.examples:preferences
    shapecast repair myapp.schemas:user --indent 0 --sort-keys user.json
    """
)
@click.pass_obj
def repair(
    app: AppContext,
    target: str,
    source: IO[str],
    indent: int | None,
    sort_keys: bool,
) -> None:
    """Read JSON from SOURCE (default: stdin) and repair it with validator TARGET.

    TARGET is an import reference such as ``package.module:validator``.
    """
    validate = app.validator(target)

    with structlog.contextvars.bound_contextvars(target=target, source=source.name):
        try:
            document = load_document(source.read())
        except DOCUMENT_ERRORS as exc:
            msg = f"Invalid JSON in {source.name}: {type(exc).__name__}: {exc}"
            raise click.ClickException(msg) from exc

        log.debug("document loaded", kind=type(document).__name__)
        app.emit(validate(document), indent=indent, sort_keys=True if sort_keys else None)
