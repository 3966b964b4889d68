"""Unsafe extraction — last resort only.

Everything in :mod:`maybe_extra.combinators` is total. The function here is
not: calling it on ``Nothing`` means the caller's own invariant is broken,
so it logs the event and raises :class:`~maybe_extra.errors.UnwrapError`.
Prefer ``unwrap``/``unpack``/``with_default`` wherever absence is possible.
"""

from __future__ import annotations

from typing import TypeVar

from maybe_extra.errors import UnwrapError
from maybe_extra.observability.logging import get_logger
from maybe_extra.types.option import Option, Some

T = TypeVar("T")

_log = get_logger(__name__)


def unwrap_or_fail(option: Option[T], message: str | None = None) -> T:
    """Return the payload of ``Some(v)``; raise :class:`UnwrapError` on ``Nothing``."""
    if isinstance(option, Some):
        return option.value
    err = UnwrapError(message) if message else UnwrapError()
    _log.error("option.unwrap_failed", code=err.code, reason=err.message)
    raise err


__all__ = ["unwrap_or_fail"]
