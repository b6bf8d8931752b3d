"""Property-based tests for QueryCompiler invariants."""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from faceted_search.application.search import (
    OptionFilter,
    QueryCompiler,
    SearchRequest,
    is_empty,
)
from faceted_search.testing import (
    filter_strategy,
    option_filter_strategy,
    range_filter_strategy,
    search_request_strategy,
)


compiler = QueryCompiler()


@given(search_request_strategy())
def test_paging_window(search_request: SearchRequest) -> None:
    body = compiler.compile(search_request)
    assert body["from"] == (search_request.current_page - 1) * search_request.page_size
    assert body["size"] == search_request.page_size


@given(st.lists(option_filter_strategy().map(lambda f: OptionFilter(f.code, (), f.is_facetable)), max_size=5))
def test_empty_option_filters_produce_no_clauses(filters: list[OptionFilter]) -> None:
    body = compiler.compile(SearchRequest(filters=tuple(filters)))
    assert body["query"]["bool"]["must"] == []


@given(st.lists(range_filter_strategy(), max_size=5))
def test_must_has_one_clause_per_active_code(filters: list) -> None:
    body = compiler.compile(SearchRequest(filters=tuple(filters)))
    active_codes = {f.code for f in filters if not is_empty(f)}
    assert len(body["query"]["bool"]["must"]) == len(active_codes)


@given(st.lists(filter_strategy(), max_size=6))
def test_one_aggregation_per_facetable_code(filters: list) -> None:
    body = compiler.compile(SearchRequest(filters=tuple(filters)))
    assert set(body["aggregations"]) == {f"{f.code}_bucket" for f in filters if f.is_facetable}


@given(st.lists(filter_strategy(), max_size=6))
def test_option_facets_exclude_only_their_own_clause(filters: list) -> None:
    request = SearchRequest(filters=tuple(filters))
    must = compiler.build_must(request)
    body = compiler.compile(request)
    facet_owner = {f.code: f for f in filters if f.is_facetable}
    for code, owner in facet_owner.items():
        agg = body["aggregations"][f"{code}_bucket"]
        if isinstance(owner, OptionFilter):
            siblings = agg["aggs"]["filtered"]["filter"]["bool"]["filter"]
            assert siblings == [clause for c, clause in must.items() if c != code]
        else:
            assert "filter" not in agg and "aggs" not in agg
