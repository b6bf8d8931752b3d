"""Application search – SearchBackend port and FacetedSearchService."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from faceted_search.application.search.compiler import QueryCompiler
from faceted_search.application.search.decoder import ResultDecoder
from faceted_search.application.search.filters import Filter
from faceted_search.application.search.request import FieldMapper, SearchRequest, SortOrder
from faceted_search.application.search.result import SearchResult
from faceted_search.config.settings import FacetSearchSettings
from faceted_search.kernel.errors import BaseError
from faceted_search.observability.logging import get_logger


@runtime_checkable
class SearchBackend(Protocol):
    """Port: send a request body to an index and return the raw response."""

    async def search(self, index: str, body: dict[str, Any]) -> Mapping[str, Any]: ...


def index_name(entity: str, scope: str) -> str:
    """Physical index for *entity* in *scope*, e.g. ``product_default``."""
    return f"{entity}_{scope}"


class FacetedSearchService:
    """Compile, dispatch and decode one faceted search.

    Transport concerns (retries, auth, connection pooling) belong to the
    :class:`SearchBackend` implementation; errors it raises propagate as-is.
    """

    def __init__(
        self,
        backend: SearchBackend,
        settings: FacetSearchSettings | None = None,
        *,
        compiler: QueryCompiler | None = None,
        decoder: ResultDecoder | None = None,
    ) -> None:
        self._backend = backend
        self._settings = settings or FacetSearchSettings()
        self._compiler = compiler or QueryCompiler(self._settings)
        self._decoder = decoder or ResultDecoder()
        self._log = get_logger(__name__)

    @property
    def index(self) -> str:
        return index_name(self._settings.index_entity, self._settings.scope)

    def build_request(
        self,
        filters: Iterable[Filter] = (),
        *,
        page: int = 1,
        page_size: int | None = None,
        order: SortOrder | tuple[str, str] | None = None,
        field_mapper: FieldMapper | None = None,
    ) -> SearchRequest:
        return SearchRequest.create(
            filters,
            current_page=page,
            page_size=page_size or self._settings.default_page_size,
            order=order,
            field_mapper=field_mapper,
        )

    async def search(self, request: SearchRequest) -> SearchResult:
        body = self._compiler.compile(request)
        index = self.index
        try:
            raw = await self._backend.search(index, body)
        except Exception as exc:
            self._log.error("search.failed", index=index, stage="dispatch", error=repr(exc))
            raise
        try:
            result = self._decoder.decode(raw, request)
        except BaseError as exc:
            self._log.error("search.failed", index=index, stage="decode", error=exc.to_dict())
            raise
        self._log.info(
            "search.executed",
            index=index,
            total=result.total,
            page=result.current_page,
            facets=list(result.facets),
        )
        return result


__all__ = ["FacetedSearchService", "SearchBackend", "index_name"]
