"""
CloudWatch Logs Wrapper Utilities

Small helpers shared by the handlers, the cache and the CLI:
- Event ordering and text rendering
- Cache path sanitization
- Logging setup driven by configuration
"""

import logging
from typing import Iterable, List, Sequence

from .config import CloudWatchLogsConfig
from .models import LogEvent

logger = logging.getLogger(__name__)

PACKAGE_LOGGER_NAME = "cloudwatch_logs_wrapper"


# =============================================================================
# Event Ordering and Rendering
# =============================================================================

def sort_events(events: Iterable[LogEvent]) -> List[LogEvent]:
    """Sort events by timestamp ascending.

    ``sorted`` is stable, so events sharing a timestamp keep the order in
    which they were fetched. Ties are common because CloudWatch timestamps
    have millisecond resolution.
    """
    return sorted(events, key=lambda event: event.timestamp)


def events_to_text(events: Sequence[LogEvent]) -> str:
    """Render events as text: each message trimmed, one per line.

    Args:
        events: Events in the order they should be printed

    Returns:
        Newline-joined messages (empty string for no events)
    """
    return "\n".join(event.message.strip() for event in events)


# =============================================================================
# Cache Path Helpers
# =============================================================================

CACHE_FILLER_CHAR = "_"


def sanitize_path_component(value: str) -> str:
    """Replace every character that is not a letter or digit with '_'.

    Not collision-free: 'a/b', 'a.b' and 'a_b' all become 'a_b'. Cache keys
    built from this inherit the collision; see ContentCache.

    Examples:
        >>> sanitize_path_component("/aws/lambda/my-func")
        '_aws_lambda_my_func'
        >>> sanitize_path_component("2024/01/01/[$LATEST]abc")
        '2024_01_01___LATEST_abc'
    """
    return "".join(c if c.isalnum() else CACHE_FILLER_CHAR for c in value)


# =============================================================================
# Logging
# =============================================================================

def configure_logging(config: CloudWatchLogsConfig) -> None:
    """Apply the configured log level to the package logger."""
    if config.enable_debug_logging:
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled for CloudWatch Logs operations")
