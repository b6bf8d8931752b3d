"""Testing fakes – in-memory doubles for application ports."""
from faceted_search.testing.fakes.search_backend import InMemorySearchBackend

__all__ = ["InMemorySearchBackend"]
