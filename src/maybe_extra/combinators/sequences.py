"""Combinators over sequences of options.

``combine`` and ``traverse`` are fail-fast: the result is ``Some`` with every
value (in input order) or ``Nothing``, never a partial list. Scanning stops
at the first ``Nothing``. The ``*_array`` variants return tuples.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from maybe_extra.types.option import Nothing, Option, Some

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def values(options: Iterable[Option[A]]) -> list[A]:
    """Payloads of every ``Some``, in order; ``Nothing`` entries are dropped."""
    return [option.value for option in options if isinstance(option, Some)]


def traverse(func: Callable[[A], Option[B]], items: Iterable[A]) -> Option[list[B]]:
    """Map ``func`` over ``items``; ``Some`` of all results, or ``Nothing``.

    >>> traverse(lambda x: Some(x * 10), [1, 2, 3])
    Some([10, 20, 30])
    >>> traverse(lambda xs: Some(xs[0]) if xs else Nothing(), [[1], []])
    Nothing
    """
    out: list[B] = []
    for item in items:
        result = func(item)
        if not isinstance(result, Some):
            return Nothing()
        out.append(result.value)
    return Some(out)


def combine(options: Iterable[Option[A]]) -> Option[list[A]]:
    """``Some`` of every payload if all options are ``Some``, else ``Nothing``.

    >>> combine([])
    Some([])
    >>> combine([Some(1), Nothing(), Some(3)])
    Nothing
    """
    return traverse(_identity, options)


def traverse_array(func: Callable[[A], Option[B]], items: Iterable[A]) -> Option[tuple[B, ...]]:
    return traverse(func, items).map(tuple)


def combine_array(options: Iterable[Option[A]]) -> Option[tuple[A, ...]]:
    return traverse_array(_identity, options)


combine_map = traverse
combine_map_array = traverse_array


def foldr_values(func: Callable[[A, B], B], initial: B, options: Iterable[Option[A]]) -> B:
    """Right fold over the payloads of the ``Some`` entries only.

    ``func`` receives ``(value, accumulator)``.
    """
    acc = initial
    for value in reversed(values(options)):
        acc = func(value, acc)
    return acc


def filter_values(func: Callable[[A], Option[B]], items: Iterable[A]) -> list[B]:
    """Map with ``func`` and keep only the ``Some`` results' payloads."""
    return values(func(item) for item in items)


def combine_both(pair: tuple[Option[A], Option[B]]) -> Option[tuple[A, B]]:
    first, second = pair
    if isinstance(first, Some) and isinstance(second, Some):
        return Some((first.value, second.value))
    return Nothing()


def combine_first(pair: tuple[Option[A], C]) -> Option[tuple[A, C]]:
    first, second = pair
    return first.map(lambda a: (a, second))


def combine_second(pair: tuple[C, Option[B]]) -> Option[tuple[C, B]]:
    first, second = pair
    return second.map(lambda b: (first, b))


def _identity(value: Any) -> Any:
    return value


__all__ = [
    "combine",
    "combine_array",
    "combine_both",
    "combine_first",
    "combine_map",
    "combine_map_array",
    "combine_second",
    "filter_values",
    "foldr_values",
    "traverse",
    "traverse_array",
    "values",
]
