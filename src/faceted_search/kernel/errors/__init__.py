"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   └── UnsupportedFilterKindError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── SerializationError
            └── MalformedResponseError
"""

from faceted_search.kernel.errors.application import ApplicationError
from faceted_search.kernel.errors.base import BaseError
from faceted_search.kernel.errors.domain import (
    DomainError,
    UnsupportedFilterKindError,
    ValidationError,
)
from faceted_search.kernel.errors.infrastructure import (
    InfrastructureError,
    MalformedResponseError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "MalformedResponseError",
    "SerializationError",
    "UnsupportedFilterKindError",
    "ValidationError",
]
