from .config import CloudWatchLogsConfig
from .exceptions import (
    CacheWriteError,
    ConfigurationError,
    EnumerationError,
    IterationLimitError,
    ListingFetchError,
    LogsWrapperError,
    PageFetchError,
    PreconditionError,
    TransportError,
)
from .models import (
    StreamIdentity,
    LogEvent,
    LogPage,
    LogGroupSummary,
    LogStreamSummary,
)
from .core import (
    # Gateway architecture
    LogsGateway,
    create_logs_gateway,
    PageCursor,
)
from .cache import (
    ContentCache,
    FileCacheStore,
    MemoryCacheStore,
)
from .handlers import (
    LogEventsReadApi,
    LogCatalogReadApi,
    StreamPreviewApi,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "CloudWatchLogsConfig",

    # Exceptions
    "CacheWriteError",
    "ConfigurationError",
    "EnumerationError",
    "IterationLimitError",
    "ListingFetchError",
    "LogsWrapperError",
    "PageFetchError",
    "PreconditionError",
    "TransportError",

    # Models
    "StreamIdentity",
    "LogEvent",
    "LogPage",
    "LogGroupSummary",
    "LogStreamSummary",

    # Gateway architecture
    "LogsGateway",
    "create_logs_gateway",
    "PageCursor",

    # Content cache
    "ContentCache",
    "FileCacheStore",
    "MemoryCacheStore",

    # Read APIs
    "LogEventsReadApi",
    "LogCatalogReadApi",
    "StreamPreviewApi",
]
