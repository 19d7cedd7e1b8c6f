"""Exception taxonomy for group registration and resolution.

Referencing an unknown group or defining mutually recursive groups is
never an error: both resolve to an empty contribution.

Each class carries the ``code`` reported in a failed ``ServiceResult``.
"""

from __future__ import annotations

from typing import ClassVar


class GroupSetError(Exception):
    """Base class for every error raised by :mod:`dyngroups`."""

    code: ClassVar[str] = "GROUPSET_ERROR"


class AmbiguousAliasError(GroupSetError, ValueError):
    """A specification carries both a canonical key and one of its aliases."""

    code = "AMBIGUOUS_ALIAS"

    def __init__(self, first: str, second: str) -> None:
        self.keys = (first, second)
        super().__init__(
            f"Cannot include both an option and its alias: "
            f"'{first}' and '{second}' are mutually exclusive."
        )


class UndefinedGroupError(GroupSetError, LookupError):
    """The requested group has no registered specification."""

    code = "UNDEFINED_GROUP"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Group '{name}' is not defined")


class InvalidArgumentError(GroupSetError, TypeError):
    """An operation was called with the wrong number or kind of arguments."""

    code = "INVALID_ARGUMENT"


class InvalidAliasError(InvalidArgumentError):
    """An extra alias targets an unknown field or shadows a canonical key."""

    code = "INVALID_CONFIG"

    def __init__(self, alias: str, message: str) -> None:
        self.alias = alias
        super().__init__(message)


class InvalidSpecError(GroupSetError, ValueError):
    """A group specification has a shape that cannot be normalized."""

    code = "INVALID_SPEC"


class UnknownSpecKeyError(InvalidSpecError):
    """Strict normalization found a key that is neither canonical nor an alias."""

    code = "UNKNOWN_SPEC_KEY"

    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        super().__init__(f"Unrecognized specification keys: {', '.join(keys)}")
