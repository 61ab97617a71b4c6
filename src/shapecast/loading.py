"""Resolve validators by import reference and parse raw documents.

A reference has the form ``package.module:attribute`` (the attribute may be
dotted, e.g. ``schemas:shapes.user``).
"""

from __future__ import annotations

import importlib
import json
import logging
from typing import Any

from shapecast.domain.errors import SchemaError
from shapecast.domain.types import Validator

logger = logging.getLogger(__name__)


def load_validator(reference: str) -> Validator[Any]:
    """Import and return the validator named by *reference*.

    Raises:
        SchemaError: If the reference is malformed, the module or attribute
            cannot be found, importing the module fails, or the target is not
            callable.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path or module_name.startswith("."):
        msg = f"Invalid validator reference {reference!r}, expected 'module:attribute'"
        raise SchemaError(msg)

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r}: {exc}"
        raise SchemaError(msg) from exc
    except Exception as exc:
        msg = f"Importing module {module_name!r} failed: {type(exc).__name__}: {exc}"
        raise SchemaError(msg) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            msg = f"Module {module_name!r} has no attribute {attr_path!r}"
            raise SchemaError(msg) from exc

    if not callable(target):
        msg = f"{reference!r} is not a validator (got {type(target).__name__})"
        raise SchemaError(msg)

    logger.debug("Loaded validator %s", reference)
    return target


def load_document(text: str) -> Any:
    """Parse JSON *text* into loosely-typed Python values.

    Raises:
        json.JSONDecodeError: If *text* is not valid JSON.
    """
    return json.loads(text)
