"""Pydantic models for the ``dyngroups.toml`` definitions file.

Sparse TOML contract: defaults baked here, the file only carries what it
defines.  A minimal file needs nothing but a ``[groups]`` table.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResolutionConfig(BaseModel):
    """[resolution] section."""

    model_config = {"frozen": True}

    strict: bool = False
    aliases: dict[str, str] = Field(default_factory=dict)


class DefinitionsConfig(BaseModel):
    """Root of the definitions file.

    ``groups`` values stay untyped here: every spec shape accepted by
    :func:`dyngroups.domain.spec.normalize_spec` is valid, and normalization
    happens when the GroupSet is built.
    """

    model_config = {"frozen": True}

    items: list[str] = Field(default_factory=list)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    groups: dict[str, Any] = Field(default_factory=dict)
