"""Config settings – Settings base class and LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from maybe_extra.errors import InvalidSettingValueError

_LEVEL_NAMES: frozenset[str] = frozenset(
    name for name in logging.getLevelNamesMapping() if name != "NOTSET"
)


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging output of the library, read from ``MAYBE_EXTRA_*`` variables."""

    _prefix: ClassVar[str] = "MAYBE_EXTRA"

    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVEL_NAMES)}"
            )

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


__all__ = ["LoggingSettings", "Settings"]
