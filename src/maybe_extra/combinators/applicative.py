"""Applicative helpers: apply functions only when every argument is present.

``and_map`` builds n-ary application one argument at a time, in the order
the arguments are supplied::

    curried = lambda a: lambda b: a + b
    and_map(Some(2), and_map(Some(1), Some(curried)))   # Some(3)

``and_then2``..``and_then4`` take a function that itself returns an option
and hand its result back unchanged. ``map2``..``map4`` wrap a plain result.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from maybe_extra.types.option import Nothing, Option, Some

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
R = TypeVar("R")


def and_map(option: Option[A], func: Option[Callable[[A], B]]) -> Option[B]:
    """``Some(f(a))`` when both ``option`` and ``func`` are ``Some``."""
    if isinstance(option, Some) and isinstance(func, Some):
        return Some(func.value(option.value))
    return Nothing()


def next_(first: Option[Any], second: Option[B]) -> Option[B]:
    """``second`` when both are ``Some``, else ``Nothing``."""
    if isinstance(first, Some) and isinstance(second, Some):
        return second
    return Nothing()


def prev(first: Option[A], second: Option[Any]) -> Option[A]:
    """``first`` when both are ``Some``, else ``Nothing``."""
    if isinstance(first, Some) and isinstance(second, Some):
        return first
    return Nothing()


def _all_values(*options: Option[Any]) -> Option[list[Any]]:
    out: list[Any] = []
    for option in options:
        if not isinstance(option, Some):
            return Nothing()
        out.append(option.value)
    return Some(out)


def and_then2(func: Callable[[A, B], Option[R]], a: Option[A], b: Option[B]) -> Option[R]:
    return _all_values(a, b).and_then(lambda args: func(*args))


def and_then3(
    func: Callable[[A, B, C], Option[R]],
    a: Option[A],
    b: Option[B],
    c: Option[C],
) -> Option[R]:
    return _all_values(a, b, c).and_then(lambda args: func(*args))


def and_then4(
    func: Callable[[A, B, C, D], Option[R]],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
) -> Option[R]:
    return _all_values(a, b, c, d).and_then(lambda args: func(*args))


def map2(func: Callable[[A, B], R], a: Option[A], b: Option[B]) -> Option[R]:
    return _all_values(a, b).map(lambda args: func(*args))


def map3(func: Callable[[A, B, C], R], a: Option[A], b: Option[B], c: Option[C]) -> Option[R]:
    return _all_values(a, b, c).map(lambda args: func(*args))


def map4(
    func: Callable[[A, B, C, D], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
) -> Option[R]:
    return _all_values(a, b, c, d).map(lambda args: func(*args))


__all__ = [
    "and_map",
    "and_then2",
    "and_then3",
    "and_then4",
    "map2",
    "map3",
    "map4",
    "next_",
    "prev",
]
