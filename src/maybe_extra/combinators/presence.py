"""Presence predicates and structural combinators."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from maybe_extra.types.option import Nothing, Option, Some

T = TypeVar("T")


def is_some(option: Option[Any]) -> bool:
    """``True`` for ``Some(_)``, ``False`` for ``Nothing``."""
    return isinstance(option, Some)


def is_nothing(option: Option[Any]) -> bool:
    """``True`` for ``Nothing``, ``False`` for ``Some(_)``."""
    return not isinstance(option, Some)


def join(option: Option[Option[T]]) -> Option[T]:
    """Flatten one level of nesting.

    >>> join(Some(Some(1)))
    Some(1)
    >>> join(Some(Nothing()))
    Nothing
    >>> join(Nothing())
    Nothing
    """
    if isinstance(option, Some):
        return option.value
    return Nothing()


def filter_(predicate: Callable[[T], bool], option: Option[T]) -> Option[T]:
    """Keep ``option`` only when it holds a value satisfying ``predicate``.

    The same ``Some`` instance is returned when the predicate holds, so
    filtering twice with the same pure predicate changes nothing.
    """
    if isinstance(option, Some) and predicate(option.value):
        return option
    return Nothing()


def to_maybe(flag: bool, value: T) -> Option[T]:
    """``Some(value)`` when ``flag`` is true, else ``Nothing``.

    >>> to_maybe(True, "x")
    Some('x')
    >>> to_maybe(False, "x")
    Nothing
    """
    return Some(value) if flag else Nothing()


def guarded(predicate: Callable[[T], bool], value: T) -> Option[T]:
    """``Some(value)`` when ``predicate(value)`` holds, else ``Nothing``."""
    return to_maybe(predicate(value), value)


__all__ = ["filter_", "guarded", "is_nothing", "is_some", "join", "to_maybe"]
