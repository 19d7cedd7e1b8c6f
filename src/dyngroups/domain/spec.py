"""Group specification model and input normalization.

A specification can be given as:

- a string: one item to include
- a sequence of strings: items to include
- a mapping with the keys ``include``, ``exclude``, ``include_groups``
  and ``exclude_groups`` (or their aliases from :data:`SPEC_ALIASES`)

Every shape is normalized into a frozen :class:`GroupSpec` right away.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from dyngroups.domain.errors import (
    AmbiguousAliasError,
    InvalidAliasError,
    InvalidSpecError,
    UnknownSpecKeyError,
)
from dyngroups.domain.ordered import extend_unique, unique

logger = logging.getLogger(__name__)

SPEC_FIELDS: tuple[str, ...] = ("include", "exclude", "include_groups", "exclude_groups")

SPEC_ALIASES: dict[str, str] = {
    "items": "include",
    "members": "include",
    "not": "exclude",
    "in": "include_groups",
    "not_in": "exclude_groups",
}


class GroupSpec(BaseModel):
    """Canonical definition of one group's membership rules.

    ``None`` means the field was never given.  That differs from an empty
    list: a group with neither ``include`` nor ``include_groups`` starts
    from every known item.
    """

    model_config = {"frozen": True}

    include: list[str] | None = None
    exclude: list[str] | None = None
    include_groups: list[str] | None = None
    exclude_groups: list[str] | None = None

    @property
    def is_exclusion_only(self) -> bool:
        return self.include is None and self.include_groups is None

    def merged(self, other: GroupSpec) -> GroupSpec:
        """Return a spec holding the ordered union of both specs, field by field."""
        updates: dict[str, list[str]] = {}
        for name in SPEC_FIELDS:
            incoming: list[str] | None = getattr(other, name)
            if incoming is None:
                continue
            combined = list(getattr(self, name) or [])
            extend_unique(combined, incoming)
            updates[name] = combined
        if not updates:
            return self
        return self.model_copy(update=updates)

    def to_dict(self) -> dict[str, list[str]]:
        """Present fields only, in canonical order."""
        return self.model_dump(exclude_none=True)


def build_aliases(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Combine :data:`SPEC_ALIASES` with *extra* aliases.

    Raises:
        InvalidAliasError: An alias targets an unknown field or shadows
            a canonical field name.
    """
    aliases = dict(SPEC_ALIASES)
    for alias, target in (extra or {}).items():
        if target not in SPEC_FIELDS:
            msg = f"Alias '{alias}' must map to one of {', '.join(SPEC_FIELDS)}, not '{target}'"
            raise InvalidAliasError(alias, msg)
        if alias in SPEC_FIELDS:
            msg = f"Alias '{alias}' shadows a canonical specification key"
            raise InvalidAliasError(alias, msg)
        aliases[alias] = target
    return aliases


def _as_list(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        bad = [v for v in value if not isinstance(v, str)]
        if bad:
            msg = f"'{key}' must contain only strings, got {bad[0]!r}"
            raise InvalidSpecError(msg)
        return list(value)
    msg = f"'{key}' must be a string or a list of strings, got {type(value).__name__}"
    raise InvalidSpecError(msg)


def _canonicalize_keys(
    spec: Mapping[str, Any],
    aliases: Mapping[str, str],
    strict: bool,
) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    given: dict[str, str] = {}  # canonical field -> key it was given as
    unknown: list[str] = []

    for key, value in spec.items():
        if key in SPEC_FIELDS:
            canonical = key
        elif key in aliases:
            canonical = aliases[key]
        else:
            unknown.append(str(key))
            continue
        if canonical in given:
            first, second = given[canonical], key
            # Report the canonical key first when it is one of the pair.
            if second == canonical:
                first, second = second, first
            raise AmbiguousAliasError(first, second)
        given[canonical] = key
        fields[canonical] = value

    if unknown:
        if strict:
            raise UnknownSpecKeyError(unknown)
        logger.warning("Ignoring unrecognized specification keys: %s", ", ".join(unknown))
    return fields


def normalize_spec(
    spec: Any,
    *,
    aliases: Mapping[str, str] | None = None,
    strict: bool = False,
) -> GroupSpec:
    """Convert any accepted specification shape into a :class:`GroupSpec`.

    Args:
        spec: A string, a sequence of strings, a mapping, or a GroupSpec.
        aliases: Alias table to apply; defaults to :data:`SPEC_ALIASES`.
        strict: Reject unrecognized mapping keys instead of dropping them.

    Raises:
        AmbiguousAliasError: A canonical key and its alias are both present.
        UnknownSpecKeyError: *strict* is set and a key is unrecognized.
        InvalidSpecError: A value has an unsupported type.
    """
    if isinstance(spec, GroupSpec):
        # Fresh lists so the caller's instance never aliases stored state.
        return GroupSpec(**{key: unique(value) for key, value in spec.to_dict().items()})
    if aliases is None:
        aliases = SPEC_ALIASES

    if isinstance(spec, Mapping):
        raw = _canonicalize_keys(spec, aliases, strict)
    elif isinstance(spec, (str, Sequence)) and not isinstance(spec, (bytes, bytearray)):
        raw = {"include": spec}
    else:
        msg = f"Unsupported group specification type: {type(spec).__name__}"
        raise InvalidSpecError(msg)

    return GroupSpec(**{key: unique(_as_list(key, value)) for key, value in raw.items()})
