"""Wrapping combinators: optional values and collections.

Each combinator owns exactly one child validator and is itself an ordinary
validator, so they nest freely.
"""

from __future__ import annotations

from typing import Any

from shapecast.domain.guards import is_iterable, is_list_like, is_missing
from shapecast.domain.types import T, Validator


def maybe(validate: Validator[T]) -> Validator[T | None]:
    """Short-circuit ``None`` to ``None``; otherwise delegate to *validate*.

    Examples:
        >>> from shapecast.domain.primitives import string
        >>> maybe(string("foo"))(None) is None, maybe(string("foo"))(2)
        (True, 'foo')
    """

    def proxy_maybe(value: Any) -> T | None:
        if is_missing(value):
            return None
        return validate(value)

    return proxy_maybe


def list_of(cast: Validator[T]) -> Validator[list[T]]:
    """Cast a sequence or set into a list of validated elements.

    Element order follows the input's iteration order and the output has the
    same length as the input. Anything else (mappings, text, numbers, ``None``)
    becomes an empty list.
    """

    def to_list(value: Any) -> list[T]:
        if is_list_like(value):
            return [cast(item) for item in value]
        return []

    return to_list


def set_of(cast: Validator[T | None]) -> Validator[set[T]]:
    """Cast any iterable into a set of validated elements.

    Elements whose validated value is ``None`` are left out, and so are
    unhashable results (a set cannot hold them). Duplicates collapse by
    Python equality, which is coarser than the membership test of
    ``either``: ``1``, ``1.0`` and ``True`` are one element here.
    Non-iterable input becomes an empty set.

    Examples:
        >>> from shapecast.domain.primitives import number
        >>> sorted(set_of(number(None))([3, 1, "b", 3]))
        [1, 3]
    """

    def to_set(value: Any) -> set[T]:
        values: set[T] = set()
        if not is_iterable(value):
            return values
        for item in value:
            casted = cast(item)
            if casted is None:
                continue
            try:
                values.add(casted)
            except TypeError:
                continue
        return values

    return to_set
