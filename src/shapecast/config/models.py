"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shapecast.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)
    sort_keys: bool = False
    ensure_ascii: bool = False
