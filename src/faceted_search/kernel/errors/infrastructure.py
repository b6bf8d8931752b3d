"""Infrastructure errors — payloads coming back from the search backend."""

from __future__ import annotations

from typing import Any

from faceted_search.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class MalformedResponseError(SerializationError):
    """The backend response lacks a key or has an unexpected shape.

    ``path`` is the dotted location of the offending element, e.g.
    ``hits.hits[3].fields._id``.
    """

    default_code = "malformed_response"

    def __init__(self, path: str, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("payload_type", "search_response")
        kwargs.setdefault("detail", {"path": path})
        super().__init__(message or f"Search response is missing '{path}'", **kwargs)
        self.path = path


__all__ = [
    "InfrastructureError",
    "MalformedResponseError",
    "SerializationError",
]
