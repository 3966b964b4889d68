"""Total extraction: get a plain value out of an option with a fallback.

``unwrap`` and ``with_default`` take an already-built default, so the caller
pays for constructing it even when the option holds a value. ``unpack`` and
``with_default_lazy`` take a zero-argument callable instead, which runs only
on the ``Nothing`` branch.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from maybe_extra.types.option import Option, Some

A = TypeVar("A")
B = TypeVar("B")


def unwrap(default: B, func: Callable[[A], B], option: Option[A]) -> B:
    """``func(v)`` for ``Some(v)``, else ``default``."""
    if isinstance(option, Some):
        return func(option.value)
    return default


def unpack(default: Callable[[], B], func: Callable[[A], B], option: Option[A]) -> B:
    """``func(v)`` for ``Some(v)``, else ``default()``."""
    if isinstance(option, Some):
        return func(option.value)
    return default()


def with_default(default: A, option: Option[A]) -> A:
    return unwrap(default, lambda v: v, option)


def with_default_lazy(default: Callable[[], A], option: Option[A]) -> A:
    return unpack(default, lambda v: v, option)


__all__ = ["unpack", "unwrap", "with_default", "with_default_lazy"]
