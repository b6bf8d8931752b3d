"""Testing support – fakes and property-based generators.

Import in your tests::

    from faceted_search.testing import InMemorySearchBackend, search_request_strategy
"""

from faceted_search.testing.fakes import InMemorySearchBackend
from faceted_search.testing.generators import (
    filter_code_strategy,
    filter_strategy,
    option_filter_strategy,
    range_filter_strategy,
    search_request_strategy,
)

__all__ = [
    "InMemorySearchBackend",
    "filter_code_strategy",
    "filter_strategy",
    "option_filter_strategy",
    "range_filter_strategy",
    "search_request_strategy",
]
