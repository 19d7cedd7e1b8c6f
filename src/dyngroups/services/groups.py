"""GroupService — resolution surfaces over a GroupSet.

Four read-only operations:
- resolve: resolved members of all or selected groups
- get_group: resolved members of exactly one group
- list_items: the known-items universe
- describe: normalized specifications

Domain exceptions are turned into ``ServiceResult.failure`` here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from dyngroups.config.models import DefinitionsConfig
from dyngroups.domain.errors import GroupSetError
from dyngroups.domain.groupset import GroupSet
from dyngroups.services.result import ServiceResult

logger = logging.getLogger(__name__)


class GroupService:
    """Wraps a :class:`GroupSet` and reports every outcome as a ServiceResult."""

    def __init__(self, groupset: GroupSet) -> None:
        self._groupset = groupset

    @property
    def groupset(self) -> GroupSet:
        return self._groupset

    @classmethod
    def from_config(cls, config: DefinitionsConfig, *, strict: bool = False) -> GroupService:
        """Build a GroupSet from a definitions file.

        Known items are registered before groups.  Domain errors raised
        while normalizing specifications propagate to the caller.
        """
        groupset = GroupSet(
            aliases=config.resolution.aliases,
            strict=strict or config.resolution.strict,
        )
        groupset.set_items(config.items)
        if config.groups:
            groupset.add(config.groups)
        logger.debug(
            "Loaded %d groups and %d known items", len(groupset), len(groupset.known_items)
        )
        return cls(groupset)

    def resolve(self, names: Sequence[str] = ()) -> ServiceResult:
        """Resolve the named groups, or every group when *names* is empty.

        Unregistered names are skipped and reported as warnings.
        """
        resolved = self._groupset.groups(*names)
        warnings = [f"Group '{name}' is not defined" for name in names if name not in resolved]
        return ServiceResult.success(
            "resolve_groups",
            {"groups": resolved, "count": len(resolved)},
            warnings=warnings,
        )

    def get_group(self, name: str) -> ServiceResult:
        try:
            members = self._groupset.group(name)
        except GroupSetError as exc:
            return ServiceResult.failure("get_group", exc)
        return ServiceResult.success(
            "get_group", {"name": name, "members": members, "count": len(members)}
        )

    def list_items(self) -> ServiceResult:
        items = self._groupset.items()
        return ServiceResult.success("list_items", {"items": items, "count": len(items)})

    def describe(self, names: Sequence[str] = ()) -> ServiceResult:
        """Return the normalized specification of each named group (default: all)."""
        try:
            specs = {
                name: self._groupset.spec(name).to_dict()
                for name in (names or self._groupset.group_names)
            }
        except GroupSetError as exc:
            return ServiceResult.failure("describe_groups", exc)
        return ServiceResult.success("describe_groups", {"specs": specs, "count": len(specs)})
