"""Application search – QueryCompiler.

Turns a :class:`SearchRequest` into an Elasticsearch/OpenSearch request body.

Facets use the multi-select pattern: each option facet is computed inside a
``global`` aggregation that re-applies every active filter except its own,
so selecting ``color=red`` still shows the counts for ``blue`` and ``green``.

Range facets are plain ``extended_stats`` aggregations under the main query
and do not re-apply sibling filters.  Their min/max therefore follow the
query scope rather than the multi-select scope used by option facets.
"""
from __future__ import annotations

from typing import Any

from faceted_search.application.search.filters import Filter, OptionFilter, RangeFilter, is_empty, is_facetable
from faceted_search.application.search.request import FieldMapper, SearchRequest
from faceted_search.config.settings import FacetSearchSettings
from faceted_search.kernel.errors import UnsupportedFilterKindError
from faceted_search.observability.logging import get_logger

BUCKET_SUFFIX = "_bucket"

Clause = dict[str, Any]


def aggregation_key(code: str) -> str:
    return code + BUCKET_SUFFIX


class QueryCompiler:
    """Compile search requests into backend query documents.

    Instances hold only immutable settings; :meth:`compile` depends on its
    argument alone and may be called concurrently.
    """

    def __init__(self, settings: FacetSearchSettings | None = None) -> None:
        self._settings = settings or FacetSearchSettings()
        self._log = get_logger(__name__)

    def compile(self, request: SearchRequest) -> dict[str, Any]:
        must = self.build_must(request)
        aggregations = self.build_aggregations(request, must)
        body: dict[str, Any] = {
            "from": request.offset,
            "size": request.page_size,
            "stored_fields": "_none_",
            "docvalue_fields": ["_id", "_score"],
            "sort": self.build_sort(request),
            "query": {"bool": {"must": list(must.values())}},
            "aggregations": aggregations,
        }
        self._log.debug(
            "search.query_compiled",
            page=request.current_page,
            page_size=request.page_size,
            must=len(must),
            aggregations=len(aggregations),
        )
        return body

    def build_sort(self, request: SearchRequest) -> list[dict[str, Any]]:
        if request.order is None:
            return []
        field = request.field_name(request.order.field)
        return [{field: {"order": request.order.direction.value}}]

    def build_must(self, request: SearchRequest) -> dict[str, Clause]:
        """Return the active clauses keyed by filter code.

        A later filter with the same code replaces the earlier clause in
        place: the key keeps its first position, the value is the last one.
        Empty filters never write, so an empty duplicate leaves the earlier
        clause untouched.
        """
        must: dict[str, Clause] = {}
        for filter_obj in request.filters:
            if is_empty(filter_obj):
                continue
            must[filter_obj.code] = self.build_clause(filter_obj, request.field_mapper)
        return must

    def build_clause(self, filter_obj: Filter, field_mapper: FieldMapper) -> Clause:
        match filter_obj:
            case OptionFilter(code=code, values=values):
                return {"terms": {field_mapper(code): list(values)}}
            case RangeFilter(code=code, from_=lower, to=upper):
                cond: dict[str, Any] = {}
                if lower is not None:
                    cond["gte"] = lower
                if upper is not None:
                    cond["lte"] = upper
                return {"range": {field_mapper(code): cond}}
            case _:
                raise UnsupportedFilterKindError(filter_obj)

    def build_aggregations(self, request: SearchRequest, must: dict[str, Clause]) -> dict[str, Any]:
        aggs: dict[str, Any] = {}
        for filter_obj in request.filters:
            if not is_facetable(filter_obj):
                continue
            siblings = [clause for code, clause in must.items() if code != filter_obj.code]
            aggs[aggregation_key(filter_obj.code)] = self.build_facet(
                filter_obj, siblings, request.field_mapper
            )
        return aggs

    def build_facet(
        self,
        filter_obj: Filter,
        siblings: list[Clause],
        field_mapper: FieldMapper,
    ) -> dict[str, Any]:
        match filter_obj:
            case RangeFilter(code=code):
                return {"extended_stats": {"field": field_mapper(code)}}
            case OptionFilter(code=code):
                return {
                    "global": {},
                    "aggs": {
                        "filtered": {
                            "filter": {"bool": {"filter": siblings}},
                            "aggs": {
                                code: {
                                    "terms": {
                                        "field": field_mapper(code),
                                        "size": self._settings.option_facet_size,
                                    },
                                },
                            },
                        },
                    },
                }
            case _:
                raise UnsupportedFilterKindError(filter_obj)


def compile_query(request: SearchRequest, settings: FacetSearchSettings | None = None) -> dict[str, Any]:
    """Shortcut for ``QueryCompiler(settings).compile(request)``."""
    return QueryCompiler(settings).compile(request)


__all__ = ["BUCKET_SUFFIX", "QueryCompiler", "aggregation_key", "compile_query"]
