"""Option[T] — Some and Nothing variants."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Some(Generic[T]):
    """Option holding exactly one value (which may itself be ``None``)."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self._value))

    def and_then(self, func: "Callable[[T], Option[U]]") -> "Option[U]":
        return func(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        # Identity first, like list/tuple equality, so Some(nan) equals itself.
        return self._value is other._value or bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option. All instances compare equal."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def and_then(self, func: Callable[[Any], Any]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Nothing):
            return True
        if isinstance(other, Some):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]

NOTHING: Nothing[Any] = Nothing()


def from_nullable(value: T | None) -> "Option[T]":
    """Lift a nullable value: ``None`` becomes ``Nothing``."""
    return Some(value) if value is not None else Nothing()


def to_nullable(option: "Option[T]") -> T | None:
    """Lower an option back to Python's nullable convention."""
    return option.value if isinstance(option, Some) else None


__all__ = ["NOTHING", "Nothing", "Option", "Some", "from_nullable", "to_nullable"]
