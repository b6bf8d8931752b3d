"""Application search – multi-select faceted search over a search backend."""
from faceted_search.application.search.compiler import QueryCompiler, aggregation_key, compile_query
from faceted_search.application.search.decoder import AppliedOptions, ResultDecoder, decode_result, mark_applied
from faceted_search.application.search.filters import (
    Filter,
    OptionFilter,
    RangeFilter,
    filter_code,
    is_empty,
    is_facetable,
)
from faceted_search.application.search.request import (
    FieldMapper,
    SearchRequest,
    SortDirection,
    SortOrder,
    identity_field_mapper,
)
from faceted_search.application.search.result import (
    Facet,
    FacetOption,
    OptionFacet,
    RangeFacet,
    SearchResult,
)
from faceted_search.application.search.service import FacetedSearchService, SearchBackend, index_name

__all__ = [
    "AppliedOptions",
    "Facet",
    "FacetOption",
    "FacetedSearchService",
    "FieldMapper",
    "Filter",
    "OptionFacet",
    "OptionFilter",
    "QueryCompiler",
    "RangeFacet",
    "RangeFilter",
    "ResultDecoder",
    "SearchBackend",
    "SearchRequest",
    "SearchResult",
    "SortDirection",
    "SortOrder",
    "aggregation_key",
    "compile_query",
    "decode_result",
    "filter_code",
    "identity_field_mapper",
    "index_name",
    "is_empty",
    "is_facetable",
    "mark_applied",
]
