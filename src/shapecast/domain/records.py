"""Structural validator: whitelist field-by-field reconstruction.

``record`` is the composition root of a shape. It is built once and then
applied to every raw input. The output always has exactly the declared
fields, in declaration order, and nothing else.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from shapecast.domain.errors import SchemaError
from shapecast.domain.guards import is_record
from shapecast.domain.types import Validator

logger = logging.getLogger(__name__)


def record(spec: Mapping[str, Validator[Any]]) -> Validator[dict[str, Any]]:
    """Build a validator producing a dict with exactly the fields of *spec*.

    Mapping input is shallow-copied and each field is validated from the
    copy; a missing field is validated as ``None``. Any other input
    (``None``, lists, strings, numbers, booleans) has no fields, so
    ``record(spec)(None)`` is the all-defaults instance of the shape.

    Examples:
        >>> from shapecast.domain.choices import either
        >>> from shapecast.domain.primitives import number
        >>> settings = record({
        ...     "language": either(["english", "spanish"]),
        ...     "items_per_page": number(10),
        ... })
        >>> settings({"language": "italian", "theme": "dark"})
        {'language': 'english', 'items_per_page': 10}

    Raises:
        SchemaError: If *spec* is not a mapping or a field validator is not
            callable.
    """
    if not is_record(spec):
        msg = f"record() expects a mapping of field validators, got {type(spec).__name__}"
        raise SchemaError(msg)
    fields: dict[str, Validator[Any]] = dict(spec)
    for name, validator in fields.items():
        if not callable(validator):
            msg = f"Field {name!r} has a non-callable validator: {validator!r}"
            raise SchemaError(msg)

    logger.debug("Built record validator: fields=%s", list(fields))

    def validate(maybe_values: Any) -> dict[str, Any]:
        source: dict[Any, Any] = dict(maybe_values) if is_record(maybe_values) else {}

        output: dict[str, Any] = {}
        for name, validate_field in fields.items():
            output[name] = validate_field(source.get(name))
        return output

    return validate
