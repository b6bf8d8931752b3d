"""Observability – SensitiveFieldsFilter structlog processor."""
from __future__ import annotations

from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"authorization", "password", "api_key", "token", "secret"}
)


class SensitiveFieldsFilter:
    """Mask values stored under sensitive keys with ``***``.

    Works both as a plain helper and as a structlog processor.  Nested
    mappings and lists are walked, so a compiled query body or backend
    response logged as a field gets masked too.
    """

    REDACTED = "***"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        fields = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(f.lower() for f in fields)

    @property
    def fields(self) -> frozenset[str]:
        return self._fields

    def is_sensitive(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Mask top-level keys only."""
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                k: (self.REDACTED if self.is_sensitive(k) else self.redact_deep(v))
                for k, v in data.items()
            }
        if type(data) in (list, tuple):
            return type(data)(self.redact_deep(v) for v in data)
        return data

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
