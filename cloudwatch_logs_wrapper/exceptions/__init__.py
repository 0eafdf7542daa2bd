# Base exception class
from .base import LogsWrapperError

# Domain-specific exceptions
from .domain_exceptions import (
    PreconditionError,
    ConfigurationError,
    TransportError,
    PageFetchError,
    EnumerationError,
    ListingFetchError,
    IterationLimitError,
    CacheReadError,
    CacheWriteError,
)

__all__ = [
    # Base exception
    "LogsWrapperError",

    # Domain exceptions (alphabetically ordered)
    "CacheReadError",
    "CacheWriteError",
    "ConfigurationError",
    "EnumerationError",
    "IterationLimitError",
    "ListingFetchError",
    "PageFetchError",
    "PreconditionError",
    "TransportError",
]
