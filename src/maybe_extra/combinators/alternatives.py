"""First-present-wins alternatives, eager and lazy.

The eager forms (``or_``, ``or_else``, ``or_list``) receive options that the
caller has already evaluated. The lazy forms receive callables and invoke
them one at a time, stopping at the first ``Some``; a callable after the
first success is never called.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from maybe_extra.types.option import Nothing, Option, Some

A = TypeVar("A")
T = TypeVar("T")


def or_(first: Option[T], second: Option[T]) -> Option[T]:
    """``first`` if it is ``Some``, else ``second``.

    >>> or_(Some(4), Some(5))
    Some(4)
    >>> or_(Nothing(), Some(5))
    Some(5)
    """
    return first if isinstance(first, Some) else second


def or_else(fallback: Option[T], preferred: Option[T]) -> Option[T]:
    """``preferred`` if it is ``Some``, else ``fallback``.

    Argument order reads naturally when partially applied in a pipeline:
    "take this value, or else fall back to ``fallback``".

    >>> or_else(Some(4), Some(5))
    Some(5)
    >>> or_else(Some(4), Nothing())
    Some(4)
    """
    return or_(preferred, fallback)


def or_list(options: Iterable[Option[T]]) -> Option[T]:
    """First ``Some`` in ``options``, or ``Nothing`` when there is none."""
    for option in options:
        if isinstance(option, Some):
            return option
    return Nothing()


def or_lazy(first: Option[T], second: Callable[[], Option[T]]) -> Option[T]:
    """Like ``or_`` but ``second`` is only called when ``first`` is ``Nothing``."""
    if isinstance(first, Some):
        return first
    return second()


def or_else_lazy(fallback: Callable[[], Option[T]], preferred: Option[T]) -> Option[T]:
    """Like ``or_else`` but ``fallback`` is only called when ``preferred`` is ``Nothing``."""
    return or_lazy(preferred, fallback)


def or_list_lazy(thunks: Iterable[Callable[[], Option[T]]]) -> Option[T]:
    """Call each thunk in order and return the first ``Some`` produced."""
    for thunk in thunks:
        result = thunk()
        if isinstance(result, Some):
            return result
    return Nothing()


def one_of(funcs: Iterable[Callable[[A], Option[T]]], value: A) -> Option[T]:
    """Try each function on ``value`` in order; return the first ``Some``.

    >>> one_of([lambda x: Nothing(), lambda x: Some(x + 1)], 1)
    Some(2)
    >>> one_of([], 1)
    Nothing
    """
    for func in funcs:
        result = func(value)
        if isinstance(result, Some):
            return result
    return Nothing()


__all__ = [
    "one_of",
    "or_",
    "or_else",
    "or_else_lazy",
    "or_lazy",
    "or_list",
    "or_list_lazy",
]
