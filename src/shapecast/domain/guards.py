"""Runtime predicates over loosely-typed values.

The input model is what ``json.loads`` produces: ``None``, ``bool``,
``int``/``float``, ``str``, sequences and mappings. Guards classify a value
into one of those variants without ever raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from typing import Any, TypeGuard

TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def is_missing(value: object) -> TypeGuard[None]:
    """``None`` stands for both JSON ``null`` and an absent field."""
    return value is None


def is_number(value: object) -> TypeGuard[int | float]:
    """Check for a JSON number.

    ``bool`` is excluded even though it subclasses ``int``.
    NaN is a float and therefore a number.

    Examples:
        >>> is_number(3), is_number(2.5), is_number(True), is_number("3")
        (True, True, False, False)
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_text(value: object) -> TypeGuard[str | bytes | bytearray]:
    return isinstance(value, TEXT_TYPES)


def is_record(value: object) -> TypeGuard[Mapping[Any, Any]]:
    """Check whether *value* can act as a source of named fields."""
    return isinstance(value, Mapping)


def is_list_like(value: object) -> TypeGuard[Sequence[Any] | Set[Any]]:
    """Check for an ordered sequence or a set, excluding text."""
    if is_text(value):
        return False
    return isinstance(value, (Sequence, Set))


def is_iterable(value: object) -> TypeGuard[Iterable[Any]]:
    """Check for a generic iterable container.

    Text and mappings are iterable in Python but are not collections of
    values in the JSON sense, so both are rejected.

    Examples:
        >>> is_iterable([]), is_iterable(set()), is_iterable(x for x in ())
        (True, True, True)
        >>> is_iterable(""), is_iterable({}), is_iterable(None)
        (False, False, False)
    """
    if is_text(value) or is_record(value):
        return False
    return isinstance(value, Iterable)
