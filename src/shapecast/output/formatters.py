"""JSON output helpers.

Repaired values may hold sets, which JSON has no notation for. They are
rendered as arrays, sorted when their elements allow it so output is stable.
"""

from __future__ import annotations

import json as _json
from collections.abc import Set
from typing import Any


def _to_jsonable(value: Any) -> Any:
    """Recursively replace sets and tuples with lists."""
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, Set):
        items = [_to_jsonable(item) for item in value]
        try:
            return sorted(items)
        except TypeError:
            return items
    return value


def to_json(
    value: Any,
    *,
    indent: int | None = 2,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
) -> str:
    """Render a repaired value as JSON text.

    Args:
        value: Output of a validator.
        indent: Spaces per nesting level; ``None`` or ``0`` for compact output.
        sort_keys: Sort object keys instead of keeping declaration order.
        ensure_ascii: Escape non-ASCII characters.
    """
    if not indent:
        return _json.dumps(
            _to_jsonable(value),
            separators=(",", ":"),
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
        )
    return _json.dumps(
        _to_jsonable(value),
        indent=indent,
        sort_keys=sort_keys,
        ensure_ascii=ensure_ascii,
    )
