"""
Domain-Specific Exceptions for the CloudWatch Logs Wrapper

This module collects every exception raised by the wrapper. All of them
extend LogsWrapperError and carry a context dictionary (log group, stream,
token, page index, ...) so failures can be diagnosed from the message alone.

Organized by category:
1. Precondition and Configuration Errors
2. Transport Errors (upstream API failures)
3. Enumeration Errors
4. Cache Errors

None of these are retried by the wrapper. Every failure aborts the
operation that raised it.
"""

from typing import Any, Dict, Optional

from .base import LogsWrapperError


# =============================================================================
# Precondition and Configuration Errors
# =============================================================================

class PreconditionError(LogsWrapperError):
    """Raised when a stream identity is malformed.

    Used for:
    - Stream names starting with the reserved prefix ('/')
    - Empty log group or stream names

    Raised before any request is issued.
    """

    def __init__(self, message: str, log_group: Optional[str] = None, log_stream: Optional[str] = None):
        self.log_group = log_group
        self.log_stream = log_stream
        context = {}
        if log_group is not None:
            context['log_group'] = log_group
        if log_stream is not None:
            context['log_stream'] = log_stream
        super().__init__(message, None, context)


class ConfigurationError(LogsWrapperError):
    """Raised when configured bounds are invalid.

    Used for:
    - Preview fetch count above the configured ceiling
    - Non-positive preview stream count
    - Enumeration exceeding its iteration ceiling (see IterationLimitError)
    """


# =============================================================================
# Transport Errors
# =============================================================================

class TransportError(LogsWrapperError):
    """Raised when the upstream CloudWatch Logs call fails.

    Used for:
    - botocore ClientError responses (access denied, missing group, throttling)
    - Endpoint, credential and timeout failures
    - Malformed responses that cannot be parsed into pages

    The upstream diagnostic message is kept verbatim in the message.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        """Initialize transport error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information (operation, resource)
            error_code: Upstream error code, e.g. 'ResourceNotFoundException'
        """
        self.error_code = error_code
        context = dict(context or {})
        if error_code:
            context.setdefault('error_code', error_code)
        super().__init__(message, original_error, context)


class PageFetchError(TransportError):
    """Raised when a single GetLogEvents page request fails during retrieval.

    The context records the stream identity, the token that was sent and the
    page index, so a failed full retrieval can be diagnosed externally.
    """


# =============================================================================
# Enumeration Errors
# =============================================================================

class EnumerationError(LogsWrapperError):
    """Raised when listing log groups or log streams fails."""


class ListingFetchError(TransportError, EnumerationError):
    """Raised when a DescribeLogGroups/DescribeLogStreams page request fails."""


class IterationLimitError(EnumerationError, ConfigurationError):
    """Raised when a listing never clears its continuation token.

    Converts a misbehaving upstream into an explicit failure instead of an
    infinite loop.
    """

    def __init__(self, operation: str, max_iterations: int, scope: Optional[str] = None, last_token: Optional[str] = None):
        self.operation = operation
        self.max_iterations = max_iterations
        message = f"{operation} did not finish within {max_iterations} pages"
        context: Dict[str, Any] = {
            'operation': operation,
            'max_iterations': max_iterations,
        }
        if scope is not None:
            context['scope'] = scope
        if last_token is not None:
            context['last_token'] = last_token
        super().__init__(message, None, context)


# =============================================================================
# Cache Errors
# =============================================================================

class CacheReadError(LogsWrapperError):
    """Raised by cache stores when an entry exists but cannot be read.

    The content cache treats this as a miss; it never reaches callers.
    """


class CacheWriteError(LogsWrapperError):
    """Raised when fetched events cannot be persisted to the cache.

    Distinct from TransportError: the events were already retrieved, only
    the cache write failed.
    """

    def __init__(self, message: str, cache_key: Optional[str] = None, original_error: Optional[Exception] = None):
        self.cache_key = cache_key
        context = {}
        if cache_key is not None:
            context['cache_key'] = cache_key
        super().__init__(message, original_error, context)
