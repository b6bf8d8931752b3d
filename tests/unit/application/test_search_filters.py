"""Unit tests for search filters and SearchRequest."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from faceted_search.application.search import (
    OptionFilter,
    RangeFilter,
    SearchRequest,
    SortDirection,
    SortOrder,
    filter_code,
    is_empty,
    is_facetable,
)
from faceted_search.kernel.errors import UnsupportedFilterKindError, ValidationError


@dataclass(frozen=True)
class TextFilter:
    code: str
    query: str = ""
    is_facetable: bool = False


class TestIsEmpty:
    def test_option_without_values_is_empty(self):
        assert is_empty(OptionFilter("color")) is True

    def test_option_with_values_is_not_empty(self):
        assert is_empty(OptionFilter("color", ("red",))) is False

    def test_range_without_bounds_is_empty(self):
        assert is_empty(RangeFilter("price")) is True

    def test_range_with_one_bound_is_not_empty(self):
        assert is_empty(RangeFilter("price", from_=10)) is False
        assert is_empty(RangeFilter("price", to=10)) is False

    def test_zero_bounds_count_as_absent(self):
        assert is_empty(RangeFilter("price", from_=0, to=0)) is True
        assert is_empty(RangeFilter("price", from_=0)) is True

    def test_zero_lower_with_upper_is_not_empty(self):
        assert is_empty(RangeFilter("price", from_=0, to=50)) is False

    def test_unknown_variant_raises(self):
        with pytest.raises(UnsupportedFilterKindError) as exc_info:
            is_empty(TextFilter("q", "shoes"))  # type: ignore[arg-type]
        assert exc_info.value.filter_code == "q"
        assert exc_info.value.kind == "TextFilter"
        assert "TextFilter" in exc_info.value.message


class TestOptionFilter:
    def test_values_normalised_to_tuple(self):
        f = OptionFilter("color", ["red", "blue"])  # type: ignore[arg-type]
        assert f.values == ("red", "blue")

    def test_duplicate_values_dropped_keeping_order(self):
        f = OptionFilter("color", ("blue", "red", "blue"))
        assert f.values == ("blue", "red")

    def test_values_stringified(self):
        f = OptionFilter("size", (42, 43))  # type: ignore[arg-type]
        assert f.values == ("42", "43")

    def test_not_facetable_by_default(self):
        assert OptionFilter("color").is_facetable is False

    def test_kind_tags(self):
        assert OptionFilter.kind == "option"
        assert RangeFilter.kind == "range"

    def test_is_frozen(self):
        f = OptionFilter("color")
        with pytest.raises((AttributeError, TypeError)):
            f.code = "size"  # type: ignore[misc]

    def test_bare_string_values_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            OptionFilter("color", "red")  # type: ignore[arg-type]
        assert exc_info.value.errors[0]["field"] == "values"
        assert "color" in exc_info.value.message

    def test_bytes_values_rejected(self):
        with pytest.raises(ValidationError):
            OptionFilter("color", b"red")  # type: ignore[arg-type]

    def test_single_value_in_list_kept_whole(self):
        assert OptionFilter("color", ["red"]).values == ("red",)  # type: ignore[arg-type]


class TestFilterAccessors:
    def test_filter_code(self):
        assert filter_code(OptionFilter("color")) == "color"
        assert filter_code(RangeFilter("price")) == "price"

    def test_is_facetable(self):
        assert is_facetable(OptionFilter("color", is_facetable=True)) is True
        assert is_facetable(RangeFilter("price")) is False

    def test_unknown_variant_raises(self):
        with pytest.raises(UnsupportedFilterKindError):
            filter_code(TextFilter("q"))  # type: ignore[arg-type]
        with pytest.raises(UnsupportedFilterKindError):
            is_facetable(TextFilter("q", is_facetable=True))  # type: ignore[arg-type]


class TestSortOrder:
    def test_string_direction_coerced(self):
        assert SortOrder("price", "DESC").direction is SortDirection.DESC  # type: ignore[arg-type]

    def test_default_ascending(self):
        assert SortOrder("price").direction is SortDirection.ASC

    def test_unknown_direction_raises(self):
        with pytest.raises(ValidationError):
            SortOrder("price", "sideways")  # type: ignore[arg-type]


class TestSearchRequest:
    def test_defaults(self):
        req = SearchRequest()
        assert req.filters == ()
        assert req.current_page == 1
        assert req.page_size == 20
        assert req.order is None
        assert req.field_name("color") == "color"

    def test_page_below_one_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SearchRequest(current_page=0)
        assert exc_info.value.errors[0]["field"] == "current_page"

    def test_page_size_zero_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SearchRequest(page_size=0)
        assert exc_info.value.errors[0]["field"] == "page_size"

    def test_both_errors_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            SearchRequest(current_page=-1, page_size=-1)
        assert len(exc_info.value.errors) == 2

    def test_offset(self):
        assert SearchRequest(current_page=3, page_size=25).offset == 50

    def test_order_pair_converted(self):
        req = SearchRequest(order=("price", "desc"))  # type: ignore[arg-type]
        assert req.order == SortOrder("price", SortDirection.DESC)

    def test_malformed_order_pair_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SearchRequest(order=("price",))  # type: ignore[arg-type]
        assert exc_info.value.errors[0]["field"] == "order"

    def test_order_pair_with_unknown_direction_rejected(self):
        with pytest.raises(ValidationError):
            SearchRequest(order=("price", "sideways"))  # type: ignore[arg-type]

    def test_create_accepts_order_pair(self):
        req = SearchRequest.create([OptionFilter("color")], order=("price", "desc"))
        assert req.order == SortOrder("price", SortDirection.DESC)
        assert isinstance(req.filters, tuple)

    def test_create_uses_field_mapper(self):
        req = SearchRequest.create(field_mapper=lambda code: f"attr.{code}")
        assert req.field_name("color") == "attr.color"

    def test_filter_by_code_returns_last_declared(self):
        first = OptionFilter("color", ("red",))
        last = RangeFilter("color", from_=1)
        req = SearchRequest(filters=(first, OptionFilter("size"), last))
        assert req.filter_by_code("color") is last

    def test_filter_by_code_missing(self):
        assert SearchRequest().filter_by_code("color") is None

    def test_filter_by_code_unknown_variant_raises(self):
        req = SearchRequest(filters=(OptionFilter("color"), TextFilter("q")))  # type: ignore[arg-type]
        with pytest.raises(UnsupportedFilterKindError):
            req.filter_by_code("color")
