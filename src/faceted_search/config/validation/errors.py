"""Config validation errors raised while building settings dataclasses."""
from __future__ import annotations

from typing import Any

from faceted_search.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or do not hold together."""
    default_code = "config_error"


def _setting_detail(
    setting_name: str, settings_class: type | None, env_key: str | None
) -> dict[str, Any]:
    detail: dict[str, Any] = {"setting": setting_name}
    if settings_class is not None:
        detail["settings_class"] = settings_class.__name__
    if env_key is not None:
        detail["env_key"] = env_key
    return detail


class MissingRequiredSettingError(ConfigError):
    """A field without default found no value in the environment.

    ``setting_name`` is the dataclass field, ``env_key`` the variable that
    was looked up, e.g. ``url`` / ``BACKEND_URL``.
    """
    default_code = "missing_required_setting"

    def __init__(
        self,
        setting_name: str,
        *,
        settings_class: type | None = None,
        env_key: str | None = None,
    ) -> None:
        source = f" (env {env_key})" if env_key else ""
        owner = f"{settings_class.__name__}." if settings_class else ""
        super().__init__(
            f"Required setting '{owner}{setting_name}'{source} is missing",
            detail=_setting_detail(setting_name, settings_class, env_key),
        )
        self.setting_name = setting_name
        self.settings_class = settings_class
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A value was found but cannot be used, e.g. ``option_facet_size=0``."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        settings_class: type | None = None,
        env_key: str | None = None,
    ) -> None:
        owner = f"{settings_class.__name__}." if settings_class else ""
        detail = _setting_detail(setting_name, settings_class, env_key)
        detail["value"] = value
        super().__init__(
            f"Setting '{owner}{setting_name}' has invalid value {value!r}: {reason}",
            detail=detail,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.settings_class = settings_class
        self.env_key = env_key


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
