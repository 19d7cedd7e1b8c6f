"""Order-preserving uniqueness — the one primitive everything else reuses.

Registration merges spec fields with it, resolution dedups members with
it, and the known-items universe is built from it.
"""

from __future__ import annotations

from collections.abc import Iterable


def extend_unique(target: list[str], values: Iterable[str], seen: set[str] | None = None) -> int:
    """Append each value of *values* to *target* unless already present.

    *seen* may be passed when the caller already tracks the members of
    *target*; it is updated in place.  Returns the number of values added.

    Examples:
        >>> out = ["a"]
        >>> extend_unique(out, ["b", "a", "b", "c"])
        2
        >>> out
        ['a', 'b', 'c']
    """
    if seen is None:
        seen = set(target)
    added = 0
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        target.append(value)
        added += 1
    return added


def unique(values: Iterable[str]) -> list[str]:
    """Return *values* with duplicates removed, first occurrence wins."""
    result: list[str] = []
    extend_unique(result, values, set())
    return result
