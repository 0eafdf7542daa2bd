# Base mixins and utilities
from .base import (
    CloudWatchMixin,
    WIRE_MODEL_CONFIG,
)

# Core domain models
from .domain_models import (
    StreamIdentity,
    LogEvent,
    LogPage,
    LogGroupSummary,
    LogStreamSummary,
)

__all__ = [
    # Base mixins and utilities
    "CloudWatchMixin",
    "WIRE_MODEL_CONFIG",

    # Domain models
    "StreamIdentity",
    "LogEvent",
    "LogPage",
    "LogGroupSummary",
    "LogStreamSummary",
]
