"""Zero-or-one element views of an option."""

from __future__ import annotations

from typing import TypeVar

from maybe_extra.types.option import Option, Some

T = TypeVar("T")


def to_list(option: Option[T]) -> list[T]:
    return list(option)


def to_array(option: Option[T]) -> tuple[T, ...]:
    return tuple(option)


def cons(option: Option[T], items: list[T]) -> list[T]:
    """Prepend the payload of ``option`` to ``items``.

    A new list is built for ``Some``; ``items`` itself is returned untouched
    for ``Nothing``.
    """
    if isinstance(option, Some):
        return [option.value, *items]
    return items


__all__ = ["cons", "to_array", "to_list"]
