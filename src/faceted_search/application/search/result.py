"""Application search – SearchResult and facet value objects."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Literal, TypeAlias

from faceted_search.application.search.filters import Number


@dataclasses.dataclass(frozen=True)
class FacetOption:
    value: str
    count: int
    applied: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "count": self.count, "applied": self.applied}


@dataclasses.dataclass(frozen=True)
class RangeFacet:
    """Min/max statistics for a numeric field.

    ``is_in_use`` is always ``False``: range facets carry no selection state.
    """

    code: str
    position: int
    min: Number
    max: Number
    is_in_use: bool = False

    kind: ClassVar[Literal["range"]] = "range"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "type": self.kind,
            "min": self.min,
            "max": self.max,
            "position": self.position,
            "isInUse": self.is_in_use,
        }


@dataclasses.dataclass(frozen=True)
class OptionFacet:
    code: str
    position: int
    options: tuple[FacetOption, ...] = ()
    is_in_use: bool = False

    kind: ClassVar[Literal["option"]] = "option"

    @property
    def applied_values(self) -> list[str]:
        return [o.value for o in self.options if o.applied]

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "type": self.kind,
            "options": [o.to_dict() for o in self.options],
            "position": self.position,
            "isInUse": self.is_in_use,
        }


Facet: TypeAlias = RangeFacet | OptionFacet


@dataclasses.dataclass(frozen=True)
class SearchResult:
    """Normalized backend result for one page of a faceted search."""

    total: int
    current_page: int
    page_size: int
    ids: tuple[str, ...] = ()
    facets: dict[str, Facet] = dataclasses.field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        if self.page_size == 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form with camelCase keys, ready for a JSON response."""
        return {
            "total": self.total,
            "currentPage": self.current_page,
            "pageSize": self.page_size,
            "ids": list(self.ids),
            "facets": {code: facet.to_dict() for code, facet in self.facets.items()},
        }


__all__ = ["Facet", "FacetOption", "OptionFacet", "RangeFacet", "SearchResult"]
