"""Domain errors — invalid search requests and unmapped filter kinds."""

from __future__ import annotations

from typing import Any

from faceted_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a search-model rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnsupportedFilterKindError(DomainError):
    """A filter variant reached the compiler that it does not know how to map.

    This is a programming error: a new filter kind was introduced without
    teaching the compiler about it.  It is never retried.
    """

    default_code = "unsupported_filter_kind"

    def __init__(self, filter_obj: object, **kwargs: Any) -> None:
        kind = type(filter_obj).__name__
        filter_code = getattr(filter_obj, "code", None)
        msg = f"The filter type '{kind}' is not mapped"
        if filter_code is not None:
            msg = f"The filter type '{kind}' of filter '{filter_code}' is not mapped"
        detail = kwargs.pop("detail", None) or {"kind": kind, "filter_code": filter_code}
        super().__init__(msg, detail=detail, **kwargs)
        self.kind = kind
        self.filter_code = filter_code


__all__ = [
    "DomainError",
    "UnsupportedFilterKindError",
    "ValidationError",
]
