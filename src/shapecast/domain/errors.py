"""Schema-definition errors.

INVARIANT: a validator call never raises. Only the factories that assemble
validators raise, and only when the schema itself is malformed.
"""

from __future__ import annotations


class SchemaError(ValueError):
    """A validator factory was given an unusable schema definition."""
