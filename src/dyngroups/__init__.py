"""dyngroups — named groups of items composed from other groups."""

from __future__ import annotations

from dyngroups.domain.errors import (
    AmbiguousAliasError,
    GroupSetError,
    InvalidAliasError,
    InvalidArgumentError,
    InvalidSpecError,
    UndefinedGroupError,
    UnknownSpecKeyError,
)
from dyngroups.domain.groupset import GroupSet
from dyngroups.domain.spec import SPEC_ALIASES, GroupSpec, normalize_spec

__version__ = "0.1.0"

__all__ = [
    "SPEC_ALIASES",
    "AmbiguousAliasError",
    "GroupSet",
    "GroupSetError",
    "GroupSpec",
    "InvalidAliasError",
    "InvalidArgumentError",
    "InvalidSpecError",
    "UndefinedGroupError",
    "UnknownSpecKeyError",
    "normalize_spec",
    "__version__",
]
