"""Unit tests for applicative helpers."""

from __future__ import annotations

import pytest

from maybe_extra.combinators import (
    and_map,
    and_then2,
    and_then3,
    and_then4,
    map2,
    map3,
    map4,
    next_,
    prev,
)
from maybe_extra.types import Nothing, Option, Some


def _inc(x: int) -> int:
    return x + 1


def _safe_div(a: int, b: int) -> Option[float]:
    return Some(a / b) if b else Nothing()


class TestAndMap:
    def test_both_present(self) -> None:
        assert and_map(Some(3), Some(_inc)) == Some(4)

    def test_function_absent(self) -> None:
        assert and_map(Some(3), Nothing()) == Nothing()

    def test_value_absent(self) -> None:
        assert and_map(Nothing(), Some(_inc)) == Nothing()

    def test_curried_pipeline(self) -> None:
        build = Some(lambda name: lambda age: f"{name}:{age}")
        assert and_map(Some(30), and_map(Some("ann"), build)) == Some("ann:30")
        assert and_map(Nothing(), and_map(Some("ann"), build)) == Nothing()


class TestNextPrev:
    @pytest.mark.parametrize(
        ("a", "b", "expected_next", "expected_prev"),
        [
            (Some(1), Some(2), Some(2), Some(1)),
            (Some(1), Nothing(), Nothing(), Nothing()),
            (Nothing(), Some(2), Nothing(), Nothing()),
            (Nothing(), Nothing(), Nothing(), Nothing()),
        ],
    )
    def test_requires_both(self, a, b, expected_next, expected_prev) -> None:
        assert next_(a, b) == expected_next
        assert prev(a, b) == expected_prev


class TestAndThenN:
    def test_and_then2_result_not_rewrapped(self) -> None:
        assert and_then2(_safe_div, Some(6), Some(3)) == Some(2.0)
        assert and_then2(_safe_div, Some(6), Some(0)) == Nothing()

    def test_and_then2_missing_argument_skips_function(self) -> None:
        calls: list[tuple[int, int]] = []

        def f(a: int, b: int) -> Option[int]:
            calls.append((a, b))
            return Some(a + b)

        assert and_then2(f, Nothing(), Some(1)) == Nothing()
        assert calls == []

    def test_and_then3(self) -> None:
        f = lambda a, b, c: Some(a + b + c)  # noqa: E731
        assert and_then3(f, Some(1), Some(2), Some(3)) == Some(6)
        assert and_then3(f, Some(1), Nothing(), Some(3)) == Nothing()

    def test_and_then4(self) -> None:
        f = lambda a, b, c, d: Some((a, b, c, d))  # noqa: E731
        assert and_then4(f, Some(1), Some(2), Some(3), Some(4)) == Some((1, 2, 3, 4))
        assert and_then4(f, Some(1), Some(2), Some(3), Nothing()) == Nothing()
        assert and_then4(lambda *_: Nothing(), Some(1), Some(2), Some(3), Some(4)) == Nothing()


class TestMapN:
    def test_map2(self) -> None:
        assert map2(lambda a, b: a * b, Some(2), Some(5)) == Some(10)
        assert map2(lambda a, b: a * b, Nothing(), Some(5)) == Nothing()

    def test_map3(self) -> None:
        assert map3(lambda a, b, c: [a, b, c], Some(1), Some(2), Some(3)) == Some([1, 2, 3])

    def test_map4_wraps_option_results(self) -> None:
        assert map4(lambda *_: Nothing(), Some(1), Some(2), Some(3), Some(4)) == Some(Nothing())
