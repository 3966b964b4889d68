"""Unit tests for the Option type."""

from __future__ import annotations

import pytest

from maybe_extra.types import NOTHING, Nothing, Some, from_nullable, to_nullable


# ---------------------------------------------------------------------------
# Some
# ---------------------------------------------------------------------------


class TestSome:
    def test_value(self) -> None:
        assert Some(3).value == 3

    def test_predicates(self) -> None:
        assert Some(1).is_some() is True
        assert Some(1).is_none() is False

    def test_none_payload_is_still_present(self) -> None:
        assert Some(None).is_some()
        assert Some(None) != Nothing()

    def test_unwrap_or_ignores_default(self) -> None:
        assert Some(1).unwrap_or(99) == 1

    def test_map(self) -> None:
        assert Some(2).map(lambda x: x + 1) == Some(3)

    def test_and_then(self) -> None:
        assert Some(2).and_then(lambda x: Some(x * 2)) == Some(4)
        assert Some(2).and_then(lambda _: Nothing()) == Nothing()

    def test_iter_yields_single_value(self) -> None:
        assert list(Some("a")) == ["a"]

    def test_equality_is_structural(self) -> None:
        assert Some([1, 2]) == Some([1, 2])
        assert Some(1) != Some(2)

    def test_equality_is_reflexive_for_nan(self) -> None:
        nan = float("nan")
        s = Some(nan)
        assert s == s
        assert Some(nan) == Some(nan)
        assert Some(Some(nan)) == Some(Some(nan))

    def test_nested(self) -> None:
        assert Some(Some(1)) == Some(Some(1))
        assert Some(Some(1)) != Some(Nothing())

    def test_hashable(self) -> None:
        assert len({Some(1), Some(1), Some(2)}) == 2

    def test_repr(self) -> None:
        assert repr(Some("x")) == "Some('x')"

    def test_is_immutable(self) -> None:
        s = Some(1)
        with pytest.raises(AttributeError):
            s.value = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Nothing
# ---------------------------------------------------------------------------


class TestNothing:
    def test_predicates(self) -> None:
        assert Nothing().is_some() is False
        assert Nothing().is_none() is True

    def test_all_instances_equal(self) -> None:
        assert Nothing() == Nothing()
        assert Nothing() == NOTHING
        assert hash(Nothing()) == hash(NOTHING)

    def test_not_equal_to_python_none(self) -> None:
        assert Nothing() != None  # noqa: E711

    def test_unwrap_or_returns_default(self) -> None:
        assert Nothing().unwrap_or(5) == 5

    def test_map_and_then_skip_function(self) -> None:
        calls: list[int] = []
        assert Nothing().map(calls.append) == Nothing()
        assert Nothing().and_then(calls.append) == Nothing()
        assert calls == []

    def test_iter_is_empty(self) -> None:
        assert list(Nothing()) == []

    def test_repr(self) -> None:
        assert repr(Nothing()) == "Nothing"


# ---------------------------------------------------------------------------
# Nullable bridge
# ---------------------------------------------------------------------------


class TestNullableBridge:
    def test_from_nullable(self) -> None:
        assert from_nullable(None) == Nothing()
        assert from_nullable(0) == Some(0)

    def test_to_nullable(self) -> None:
        assert to_nullable(Nothing()) is None
        assert to_nullable(Some("v")) == "v"
