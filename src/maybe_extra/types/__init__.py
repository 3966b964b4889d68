"""Value types — public re-export surface.

Modules:
  option.py — Some, Nothing, Option, from_nullable, to_nullable
"""

from maybe_extra.types.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    from_nullable,
    to_nullable,
)

__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "from_nullable",
    "to_nullable",
]
