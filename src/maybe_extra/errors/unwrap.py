"""Errors raised by the unsafe extraction escape hatch."""

from __future__ import annotations

from typing import Any

from maybe_extra.errors.base import MaybeExtraError


class UnwrapError(MaybeExtraError):
    """A value was forcibly extracted from ``Nothing``.

    This signals a broken precondition in the calling code. It is not meant
    to be caught and recovered from; use the total extraction combinators
    (``unwrap``, ``unpack``, ``with_default``) when absence is expected.
    """

    default_code = "unwrap_nothing"

    def __init__(self, message: str = "Called unwrap_or_fail() on Nothing", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["UnwrapError"]
