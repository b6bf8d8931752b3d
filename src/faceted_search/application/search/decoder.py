"""Application search – ResultDecoder.

Reads the backend response produced for a :class:`QueryCompiler` body back
into a :class:`SearchResult`.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from faceted_search.application.search.compiler import BUCKET_SUFFIX
from faceted_search.application.search.filters import Filter, OptionFilter, is_facetable
from faceted_search.application.search.request import SearchRequest
from faceted_search.application.search.result import (
    Facet,
    FacetOption,
    OptionFacet,
    RangeFacet,
    SearchResult,
)
from faceted_search.kernel.errors import MalformedResponseError
from faceted_search.observability.logging import get_logger


class AppliedOptions(NamedTuple):
    options: tuple[FacetOption, ...]
    is_in_use: bool


def mark_applied(options: Sequence[FacetOption], filter_obj: Filter | None) -> AppliedOptions:
    """Flag the options selected by *filter_obj*.

    Only an :class:`OptionFilter` can select options; for anything else every
    option comes back unapplied and the facet is not in use.
    """
    match filter_obj:
        case OptionFilter(values=values):
            selected = frozenset(values)
            marked = tuple(dataclasses.replace(o, applied=o.value in selected) for o in options)
            return AppliedOptions(marked, any(o.applied for o in marked))
        case _:
            return AppliedOptions(tuple(dataclasses.replace(o, applied=False) for o in options), False)


def _get(container: Any, key: str, path: str) -> Any:
    if not isinstance(container, Mapping) or key not in container:
        raise MalformedResponseError(path)
    return container[key]


def _stringify_key(key: Any) -> str:
    # numeric terms come back as 5.0 for double fields
    if isinstance(key, float) and key.is_integer():
        return str(int(key))
    return str(key)


class ResultDecoder:
    def __init__(self) -> None:
        self._log = get_logger(__name__)

    def decode(self, raw: Mapping[str, Any], request: SearchRequest) -> SearchResult:
        result = SearchResult(
            total=self.decode_total(raw),
            current_page=request.current_page,
            page_size=request.page_size,
            ids=self.decode_ids(raw),
            facets=self.decode_facets(raw, request),
        )
        self._log.debug("search.result_decoded", total=result.total, ids=len(result.ids), facets=len(result.facets))
        return result

    def decode_total(self, raw: Mapping[str, Any]) -> int:
        total = _get(_get(_get(raw, "hits", "hits"), "total", "hits.total"), "value", "hits.total.value")
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            raise MalformedResponseError("hits.total.value", f"Invalid total {total!r} in search response")
        return total

    def decode_ids(self, raw: Mapping[str, Any]) -> tuple[str, ...]:
        hits = _get(_get(raw, "hits", "hits"), "hits", "hits.hits")
        if not isinstance(hits, Sequence) or isinstance(hits, (str, bytes)):
            raise MalformedResponseError("hits.hits", "Search response 'hits.hits' is not a list")
        ids = []
        for i, hit in enumerate(hits):
            path = f"hits.hits[{i}].fields._id"
            values = _get(_get(hit, "fields", f"hits.hits[{i}].fields"), "_id", path)
            if not isinstance(values, Sequence) or isinstance(values, (str, bytes)) or not values:
                raise MalformedResponseError(path, f"Search response '{path}' holds no identifier")
            ids.append(values[0])
        return tuple(ids)

    def decode_facets(self, raw: Mapping[str, Any], request: SearchRequest) -> dict[str, Facet]:
        if "aggregations" not in raw:
            if any(is_facetable(f) for f in request.filters):
                raise MalformedResponseError("aggregations")
            return {}
        aggregations = raw["aggregations"]
        if not isinstance(aggregations, Mapping):
            raise MalformedResponseError("aggregations", "Search response 'aggregations' is not an object")

        facets: dict[str, Facet] = {}
        for key, agg in aggregations.items():
            code = key.removesuffix(BUCKET_SUFFIX)
            facet = self.decode_facet(code, agg, request, position=len(facets), path=f"aggregations.{key}")
            if facet is None:
                self._log.debug("search.facet_skipped", code=code)
                continue
            facets[code] = facet
        return facets

    def decode_facet(
        self,
        code: str,
        agg: Any,
        request: SearchRequest,
        *,
        position: int,
        path: str,
    ) -> Facet | None:
        """Decode one aggregation, or return ``None`` when it carries no data.

        A ``min`` of ``0`` is read as "no data" just like a missing one.
        """
        if not isinstance(agg, Mapping):
            raise MalformedResponseError(path, f"Search response '{path}' is not an object")
        filtered = agg.get("filtered")
        if isinstance(filtered, Mapping) and code in filtered:
            agg, path = filtered[code], f"{path}.filtered.{code}"
            if not isinstance(agg, Mapping):
                raise MalformedResponseError(path, f"Search response '{path}' is not an object")

        if agg.get("min"):
            return RangeFacet(
                code=code,
                position=position,
                min=agg["min"],
                max=_get(agg, "max", f"{path}.max"),
            )
        if agg.get("buckets"):
            options = [
                FacetOption(
                    value=_stringify_key(_get(bucket, "key", f"{path}.buckets[{i}].key")),
                    count=_get(bucket, "doc_count", f"{path}.buckets[{i}].doc_count"),
                )
                for i, bucket in enumerate(agg["buckets"])
            ]
            applied = mark_applied(options, request.filter_by_code(code))
            return OptionFacet(
                code=code,
                position=position,
                options=applied.options,
                is_in_use=applied.is_in_use,
            )
        return None


def decode_result(raw: Mapping[str, Any], request: SearchRequest) -> SearchResult:
    """Shortcut for ``ResultDecoder().decode(raw, request)``."""
    return ResultDecoder().decode(raw, request)


__all__ = ["AppliedOptions", "ResultDecoder", "decode_result", "mark_applied"]
