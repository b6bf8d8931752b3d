"""Application search – filter variants.

``Filter`` is a closed union of :class:`OptionFilter` and :class:`RangeFilter`.
Code that branches on the filter kind matches on the union and raises
:class:`~faceted_search.kernel.errors.UnsupportedFilterKindError` in the
fallback arm, so a new variant fails loudly until every consumer learns it.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Literal, TypeAlias

from faceted_search.kernel.errors import UnsupportedFilterKindError, ValidationError

Number: TypeAlias = int | float


@dataclasses.dataclass(frozen=True)
class OptionFilter:
    """Discrete-value filter; ``values`` holds the currently selected options."""

    code: str
    values: tuple[str, ...] = ()
    is_facetable: bool = False

    kind: ClassVar[Literal["option"]] = "option"

    def __post_init__(self) -> None:
        if isinstance(self.values, (str, bytes)):
            raise ValidationError(
                f"Values of option filter '{self.code}' must be a collection of strings, got {self.values!r}",
                errors=[{"field": "values", "value": self.values}],
            )
        # keep first-seen order, drop duplicates
        object.__setattr__(self, "values", tuple(dict.fromkeys(str(v) for v in self.values)))


@dataclasses.dataclass(frozen=True)
class RangeFilter:
    """Numeric range filter with optional inclusive bounds."""

    code: str
    from_: Number | None = None
    to: Number | None = None
    is_facetable: bool = False

    kind: ClassVar[Literal["range"]] = "range"


Filter: TypeAlias = OptionFilter | RangeFilter


def is_empty(filter_obj: Filter) -> bool:
    """Return ``True`` when *filter_obj* constrains nothing.

    A range bound of ``0`` counts as absent here, so ``RangeFilter("price", 0, 0)``
    is empty.  The query clause itself still emits a ``0`` bound when the
    other bound is set.
    """
    match filter_obj:
        case OptionFilter(values=values):
            return not values
        case RangeFilter(from_=lower, to=upper):
            return not lower and not upper
        case _:
            raise UnsupportedFilterKindError(filter_obj)


def filter_code(filter_obj: Filter) -> str:
    match filter_obj:
        case OptionFilter(code=code) | RangeFilter(code=code):
            return code
        case _:
            raise UnsupportedFilterKindError(filter_obj)


def is_facetable(filter_obj: Filter) -> bool:
    match filter_obj:
        case OptionFilter(is_facetable=facetable) | RangeFilter(is_facetable=facetable):
            return facetable
        case _:
            raise UnsupportedFilterKindError(filter_obj)


__all__ = ["Filter", "Number", "OptionFilter", "RangeFilter", "filter_code", "is_empty", "is_facetable"]
