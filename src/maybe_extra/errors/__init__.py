"""Error hierarchy — public re-export surface.

Hierarchy::

    MaybeExtraError
    ├── UnwrapError                  (unwrap.py)
    └── ConfigError                  (config.py)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError

Combinators never raise: ``Nothing`` is how they report "no result".
"""

from maybe_extra.errors.base import MaybeExtraError
from maybe_extra.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from maybe_extra.errors.unwrap import UnwrapError

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MaybeExtraError",
    "MissingRequiredSettingError",
    "UnwrapError",
]
