"""Application search – SearchRequest value object."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable, Iterable, TypeAlias

from faceted_search.application.search.filters import Filter, filter_code
from faceted_search.kernel.errors import ValidationError

FieldMapper: TypeAlias = Callable[[str], str]


def identity_field_mapper(code: str) -> str:
    return code


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class SortOrder:
    """Single sort criterion on a logical field code."""

    field: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if isinstance(self.direction, SortDirection):
            return
        try:
            direction = SortDirection(str(self.direction).lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown sort direction {self.direction!r}",
                errors=[{"field": "direction", "value": self.direction}],
                cause=exc,
            ) from exc
        object.__setattr__(self, "direction", direction)


def _sort_order_from_pair(pair: object) -> SortOrder:
    try:
        field, direction = pair  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Sort order must be a SortOrder or a (field, direction) pair, got {pair!r}",
            errors=[{"field": "order", "value": pair}],
            cause=exc,
        ) from exc
    return SortOrder(field=field, direction=direction)


@dataclasses.dataclass(frozen=True)
class SearchRequest:
    """Everything needed to compile one search round trip.

    ``filters`` order decides facet declaration order.  ``field_mapper``
    turns a logical filter code into the backend's physical field name and
    must be free of side effects; the compiler calls it once per clause and
    aggregation.
    """

    filters: tuple[Filter, ...] = ()
    current_page: int = 1
    page_size: int = 20
    order: SortOrder | tuple[str, str] | None = None
    field_mapper: FieldMapper = dataclasses.field(
        default=identity_field_mapper, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        if self.order is not None and not isinstance(self.order, SortOrder):
            object.__setattr__(self, "order", _sort_order_from_pair(self.order))
        errors: list[dict[str, object]] = []
        if self.current_page < 1:
            errors.append({"field": "current_page", "value": self.current_page, "rule": ">= 1"})
        if self.page_size < 1:
            errors.append({"field": "page_size", "value": self.page_size, "rule": ">= 1"})
        if errors:
            raise ValidationError("Invalid search request paging", errors=errors)

    @classmethod
    def create(
        cls,
        filters: Iterable[Filter] = (),
        *,
        current_page: int = 1,
        page_size: int = 20,
        order: SortOrder | tuple[str, str] | None = None,
        field_mapper: FieldMapper | None = None,
    ) -> SearchRequest:
        """Build a request from any iterable of filters."""
        return cls(
            filters=tuple(filters),
            current_page=current_page,
            page_size=page_size,
            order=order,
            field_mapper=field_mapper or identity_field_mapper,
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    def field_name(self, code: str) -> str:
        return self.field_mapper(code)

    def filter_by_code(self, code: str) -> Filter | None:
        """Return the last filter declared with *code*, or ``None``."""
        found: Filter | None = None
        for filter_obj in self.filters:
            if filter_code(filter_obj) == code:
                found = filter_obj
        return found


__all__ = [
    "FieldMapper",
    "SearchRequest",
    "SortDirection",
    "SortOrder",
    "identity_field_mapper",
]
