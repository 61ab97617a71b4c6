"""Validator type.

A validator is a total function from an untrusted value to a value of a
fixed target type. It never raises, never mutates its input, and returns an
equal output for equal input.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

T = TypeVar("T")
D = TypeVar("D")

Validator: TypeAlias = Callable[[Any], T]
