"""Tests for the public package surface."""

import dyngroups


def test_exports() -> None:
    gs = dyngroups.GroupSet()
    gs.add("g1", "m1").add("g1", ["m2"])
    assert gs.groups() == {"g1": ["m1", "m2"]}
    assert dyngroups.normalize_spec("x") == dyngroups.GroupSpec(include=["x"])
    assert dyngroups.SPEC_ALIASES["not_in"] == "exclude_groups"


def test_error_hierarchy() -> None:
    for cls in (
        dyngroups.AmbiguousAliasError,
        dyngroups.UndefinedGroupError,
        dyngroups.InvalidArgumentError,
        dyngroups.InvalidAliasError,
        dyngroups.InvalidSpecError,
        dyngroups.UnknownSpecKeyError,
    ):
        assert issubclass(cls, dyngroups.GroupSetError)
