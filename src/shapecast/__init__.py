"""shapecast — repair untrusted data into a known shape.

Validators are total functions: they never raise and never coerce. Anything
missing or malformed is replaced by a declared default.
"""

from __future__ import annotations

from shapecast.domain.choices import either
from shapecast.domain.combinators import list_of, maybe, set_of
from shapecast.domain.errors import SchemaError
from shapecast.domain.primitives import always, boolean, number, string
from shapecast.domain.records import record
from shapecast.domain.types import Validator

__version__ = "0.1.0"

__all__ = [
    "SchemaError",
    "Validator",
    "__version__",
    "always",
    "boolean",
    "either",
    "list_of",
    "maybe",
    "number",
    "record",
    "set_of",
    "string",
]
