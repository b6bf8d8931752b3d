"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from faceted_search.observability.logging.filters import SensitiveFieldsFilter


class JsonLoggerFactory:
    """Route structlog through the stdlib root logger as one JSON object per line."""

    @staticmethod
    def processors(sensitive_fields: frozenset[str] | None = None) -> list[Any]:
        """Processor chain shared by structlog and foreign stdlib records.

        Masking runs after every processor that adds keys (bound
        contextvars included), so nothing reaches the renderer unmasked.
        ``sensitive_fields=frozenset()`` disables masking.
        """
        chain: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
        redactor = SensitiveFieldsFilter(sensitive_fields)
        if redactor.fields:
            chain.append(redactor)
        return chain

    @classmethod
    def configure(
        cls,
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        shared = cls.processors(sensitive_fields)
        structlog.configure(
            processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
