"""Errors raised while reading settings from the environment."""
from __future__ import annotations

from typing import Any

from maybe_extra.errors.base import MaybeExtraError


class ConfigError(MaybeExtraError):
    """Settings could not be loaded.

    ``setting_name`` names the offending environment variable or field when
    one is known; it is also copied into ``detail["setting"]``.
    """

    default_code = "config_error"

    def __init__(self, message: str, *, setting: str | None = None, **kwargs: Any) -> None:
        if setting is not None:
            kwargs["detail"] = {"setting": setting, **(kwargs.get("detail") or {})}
        super().__init__(message, **kwargs)
        self.setting_name = setting


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set and has no default", setting=setting_name)


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            setting=setting_name,
            detail={"reason": reason},
        )
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
