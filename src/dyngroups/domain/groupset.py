"""GroupSet — named group specifications and on-demand membership resolution.

Groups are resolved lazily: registration only accumulates specification
data, and every :meth:`GroupSet.groups` / :meth:`GroupSet.group` call walks
the specifications again.

Resolution of one group (``_resolve``):

1. A group already on the current resolution stack resolves to ``[]``
   for that occurrence, which breaks reference cycles.
2. An unregistered group resolves to ``[]``.
3. The exclusion set is ``exclude`` plus the members of every
   ``exclude_groups`` entry.
4. The inclusion base is ``include`` plus the members of every
   ``include_groups`` entry, or the whole known-items universe when the
   spec has neither field.
5. The result is the inclusion base minus the exclusion set, in
   first-occurrence order.

INVARIANT: GroupSet holds no locks. Callers sharing one across threads
must serialize every call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from dyngroups.domain.errors import InvalidArgumentError, UndefinedGroupError
from dyngroups.domain.ordered import extend_unique
from dyngroups.domain.spec import GroupSpec, build_aliases, normalize_spec

logger = logging.getLogger(__name__)


def _flatten_items(items: tuple[Any, ...]) -> list[str]:
    """Flatten strings and sequences of strings one level.

    Raises:
        InvalidArgumentError: An argument or a nested value is not a string.
    """
    flat: list[str] = []
    for entry in items:
        if isinstance(entry, str):
            flat.append(entry)
            continue
        if isinstance(entry, (bytes, bytearray, Mapping)) or not isinstance(entry, Iterable):
            msg = f"Items must be strings or sequences of strings, got {type(entry).__name__}"
            raise InvalidArgumentError(msg)
        for value in entry:
            if not isinstance(value, str):
                msg = f"Items must be strings, got {value!r}"
                raise InvalidArgumentError(msg)
            flat.append(value)
    return flat


class GroupSet:
    """A collection of named groups plus a pool of known items.

    Usage::

        gs = GroupSet()
        gs.add("admins", ["alice", "bob"])
        gs.add("staff", {"in": "admins", "include": "carol"})
        gs.group("staff")  # ['carol', 'alice', 'bob']

    Args:
        aliases: Extra specification-key aliases, merged over the defaults.
        strict: Reject unrecognized specification keys.
    """

    def __init__(self, *, aliases: Mapping[str, str] | None = None, strict: bool = False) -> None:
        self._aliases = build_aliases(aliases)
        self._strict = strict
        self._groups: dict[str, GroupSpec] = {}
        self._known_items: list[str] = []

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._groups))

    def __repr__(self) -> str:
        return f"GroupSet(groups={len(self._groups)}, known_items={len(self._known_items)})"

    @property
    def group_names(self) -> list[str]:
        return list(self._groups)

    @property
    def known_items(self) -> list[str]:
        """Items registered via :meth:`add_items`, without group includes."""
        return list(self._known_items)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def _collect(self, groups: str | Mapping[str, Any], spec: Any, op: str) -> dict[str, GroupSpec]:
        """Normalize the ``(name, spec)`` or ``{name: spec}`` call forms."""
        if isinstance(groups, str):
            if spec is None:
                msg = f"{op}() requires a specification for group '{groups}'"
                raise InvalidArgumentError(msg)
            pairs: Mapping[str, Any] = {groups: spec}
        elif isinstance(groups, Mapping):
            if spec is not None:
                msg = f"{op}() takes either a name and a spec, or a single mapping"
                raise InvalidArgumentError(msg)
            pairs = groups
        else:
            msg = f"{op}() expects a group name or a mapping, got {type(groups).__name__}"
            raise InvalidArgumentError(msg)

        normalized: dict[str, GroupSpec] = {}
        for name, value in pairs.items():
            if not isinstance(name, str):
                msg = f"Group names must be strings, got {name!r}"
                raise InvalidArgumentError(msg)
            normalized[name] = normalize_spec(value, aliases=self._aliases, strict=self._strict)
        return normalized

    def add(self, groups: str | Mapping[str, Any], spec: Any = None) -> GroupSet:
        """Merge specifications into the named group(s).

        Accepts ``add(name, spec)`` or ``add({name: spec, ...})``.  Each
        field is merged as an ordered union with what is already stored.
        Returns ``self`` for chaining.
        """
        for name, incoming in self._collect(groups, spec, "add").items():
            existing = self._groups.get(name)
            self._groups[name] = incoming if existing is None else existing.merged(incoming)
            logger.debug("Registered group %s: %s", name, incoming.to_dict())
        return self

    def set(self, groups: str | Mapping[str, Any], spec: Any = None) -> GroupSet:
        """Replace the specification of the named group(s).

        Same call forms as :meth:`add`.  Every spec is normalized before any
        stored group is dropped, so a failing call changes nothing.
        """
        normalized = self._collect(groups, spec, "set")
        for name in normalized:
            self._groups.pop(name, None)
        return self.add(normalized)

    def add_items(self, *items: str | Iterable[str]) -> int:
        """Register known items; sequences are flattened one level.

        Returns the total number of known items.
        """
        extend_unique(self._known_items, _flatten_items(items))
        return len(self._known_items)

    def set_items(self, *items: str | Iterable[str]) -> int:
        """Replace the known items.  Returns the new count.

        The arguments are validated before the current items are cleared.
        """
        flat = _flatten_items(items)
        self._known_items.clear()
        return self.add_items(flat)

    add_members = add_items
    set_members = set_items

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def spec(self, name: str) -> GroupSpec:
        """Return a copy of the stored specification of *name*."""
        try:
            return self._groups[name].model_copy(deep=True)
        except KeyError:
            raise UndefinedGroupError(name) from None

    def items(self) -> list[str]:
        """Every known item followed by every item any group includes directly."""
        universe = list(self._known_items)
        seen = set(universe)
        for spec in self._groups.values():
            if spec.include:
                extend_unique(universe, spec.include, seen)
        return universe

    def group(self, *names: str) -> list[str]:
        """Resolve exactly one registered group.

        Raises:
            InvalidArgumentError: Not exactly one name was given.
            UndefinedGroupError: The group is not registered.
        """
        if len(names) != 1:
            msg = f"group() takes exactly one group name ({len(names)} given); use groups()"
            raise InvalidArgumentError(msg)
        name = names[0]
        if name not in self._groups:
            raise UndefinedGroupError(name)
        return self._resolve(name, set())

    def groups(self, *names: str) -> dict[str, list[str]]:
        """Resolve the requested groups (default: all registered groups).

        Names that are not registered are left out of the result.
        """
        requested = names or tuple(self._groups)
        return {name: self._resolve(name, set()) for name in requested if name in self._groups}

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve_all(self, names: list[str], visiting: set[str]) -> list[str]:
        members: list[str] = []
        seen: set[str] = set()
        for name in names:
            extend_unique(members, self._resolve(name, visiting), seen)
        return members

    def _resolve(self, name: str, visiting: set[str]) -> list[str]:
        if name in visiting:
            logger.debug("Breaking group reference cycle at %s", name)
            return []
        spec = self._groups.get(name)
        if spec is None:
            return []

        visiting.add(name)
        try:
            excluded = set(spec.exclude or ())
            if spec.exclude_groups:
                excluded.update(self._resolve_all(spec.exclude_groups, visiting))

            if spec.is_exclusion_only:
                base = self.items()
            else:
                base = list(spec.include or ())
                if spec.include_groups:
                    base.extend(self._resolve_all(spec.include_groups, visiting))
        finally:
            visiting.discard(name)

        members: list[str] = []
        extend_unique(members, (item for item in base if item not in excluded))
        return members
