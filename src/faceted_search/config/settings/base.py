"""Config settings – Settings base class and FacetSearchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from faceted_search.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _invalid(self, field_name: str, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(
            field_name, getattr(self, field_name), reason, settings_class=type(self)
        )


@dataclasses.dataclass
class FacetSearchSettings(Settings):
    """Tunables for query compilation and index selection.

    Read from ``FACET_SEARCH_*`` environment variables by
    :class:`~faceted_search.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "FACET_SEARCH"

    option_facet_size: int = 500
    default_page_size: int = 20
    index_entity: str = "product"
    scope: str = "default"

    def _validate(self) -> None:
        if self.option_facet_size < 1:
            raise self._invalid("option_facet_size", "must be >= 1")
        if self.default_page_size < 1:
            raise self._invalid("default_page_size", "must be >= 1")
        if not self.index_entity.strip():
            raise self._invalid("index_entity", "must not be blank")
        if not self.scope.strip():
            raise self._invalid("scope", "must not be blank")


__all__ = ["FacetSearchSettings", "Settings"]
