"""Tests for the Union tagged container — the base every domain type wraps."""

from __future__ import annotations

import dataclasses

import pytest

from railmonads import InvalidAccessError, MonadError, Union


class TestConstruction:
    def test_left_populates_left_slot(self):
        union = Union.left("oops")
        assert union.is_left
        assert not union.is_right
        assert union.left_value() == "oops"

    def test_right_populates_right_slot(self):
        union = Union.right(42)
        assert union.is_right
        assert not union.is_left
        assert union.right_value() == 42

    def test_left_none_is_still_left(self):
        assert Union.left(None).is_left

    def test_union_is_immutable(self):
        union = Union.right(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            union._is_left = True  # type: ignore[misc]

    def test_direct_construction_with_both_slots_is_rejected(self):
        with pytest.raises(ValueError, match="exactly one slot"):
            Union(True, 1, 2)

    def test_direct_construction_cannot_bypass_the_right_side(self):
        with pytest.raises(ValueError, match="exactly one slot"):
            Union(False, "left", "right")


class TestInvalidAccess:
    def test_reading_right_of_left_raises(self):
        with pytest.raises(InvalidAccessError, match="Cannot access Right when value is Left"):
            Union.left("x").right_value()

    def test_reading_left_of_right_raises(self):
        with pytest.raises(InvalidAccessError, match="Cannot access Left when value is Right"):
            Union.right("x").left_value()

    def test_invalid_access_is_a_monad_error_and_value_error(self):
        with pytest.raises(MonadError):
            Union.right(1).left_value()
        with pytest.raises(ValueError):
            Union.right(1).left_value()


class TestMatch:
    def test_match_invokes_only_left_function(self):
        calls: list[str] = []

        def on_left(v: str) -> str:
            calls.append("left")
            return f"L:{v}"

        def on_right(v: int) -> str:
            calls.append("right")
            return f"R:{v}"

        assert Union.left("a").match(on_left, on_right) == "L:a"
        assert calls == ["left"]

    def test_match_invokes_only_right_function(self):
        calls: list[str] = []
        result = Union.right(3).match(
            lambda v: calls.append("left"),
            lambda v: v * 10,
        )
        assert result == 30
        assert calls == []


class TestEqualityAndRepr:
    def test_equal_when_same_side_and_value(self):
        assert Union.right(1) == Union.right(1)
        assert Union.left("e") == Union.left("e")

    def test_not_equal_across_sides(self):
        assert Union.left(1) != Union.right(1)

    def test_hash_consistent_with_equality(self):
        assert hash(Union.right(1)) == hash(Union.right(1))
        assert len({Union.right(1), Union.right(1), Union.left(1)}) == 2

    def test_repr(self):
        assert repr(Union.left("e")) == "Left('e')"
        assert repr(Union.right(2)) == "Right(2)"
