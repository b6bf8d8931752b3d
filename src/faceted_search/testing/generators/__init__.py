"""Testing generators – Hypothesis strategies for search requests."""
from faceted_search.testing.generators.strategies import (
    filter_code_strategy,
    filter_strategy,
    option_filter_strategy,
    range_filter_strategy,
    search_request_strategy,
)

__all__ = [
    "filter_code_strategy",
    "filter_strategy",
    "option_filter_strategy",
    "range_filter_strategy",
    "search_request_strategy",
]
