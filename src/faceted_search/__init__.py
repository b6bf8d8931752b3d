"""
faceted_search – multi-select faceted search over a document search backend.

Import path convention::

    from faceted_search.application.search import OptionFilter, SearchRequest, compile_query
    from faceted_search.kernel.errors import UnsupportedFilterKindError
    from faceted_search.config import FacetSearchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
