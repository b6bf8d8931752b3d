"""Application – use-case building blocks (framework-agnostic)."""

from faceted_search.application.search import (
    FacetedSearchService,
    OptionFilter,
    QueryCompiler,
    RangeFilter,
    ResultDecoder,
    SearchRequest,
    SearchResult,
)

__all__ = [
    "FacetedSearchService",
    "OptionFilter",
    "QueryCompiler",
    "RangeFilter",
    "ResultDecoder",
    "SearchRequest",
    "SearchResult",
]
