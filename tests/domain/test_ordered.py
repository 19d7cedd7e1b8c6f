"""Tests for the order-preserving uniqueness helpers."""

from __future__ import annotations

from dyngroups.domain.ordered import extend_unique, unique


class TestExtendUnique:
    def test_appends_new_values_in_order(self) -> None:
        target = ["a"]
        added = extend_unique(target, ["b", "a", "c", "b"])
        assert target == ["a", "b", "c"]
        assert added == 2

    def test_shared_seen_set_is_updated(self) -> None:
        target: list[str] = []
        seen: set[str] = {"x"}
        extend_unique(target, ["x", "y"], seen)
        assert target == ["y"]
        assert seen == {"x", "y"}

    def test_empty_values(self) -> None:
        target = ["a"]
        assert extend_unique(target, []) == 0
        assert target == ["a"]


class TestUnique:
    def test_first_occurrence_wins(self) -> None:
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_accepts_generators(self) -> None:
        assert unique(x for x in "abca") == ["a", "b", "c"]
