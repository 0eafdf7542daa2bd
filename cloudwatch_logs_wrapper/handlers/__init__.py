"""
Handler Layer for the CloudWatch Logs Wrapper

Read APIs built on top of the core gateway:
- log_events: full, ordered retrieval of one stream (with content cache)
- log_catalog: listing of log groups and log streams
- stream_preview: concurrent single-page previews of recent streams

Architecture:
handlers/ (this layer) -> core/ (gateway, cursor) -> CloudWatch Logs
handlers/ (this layer) -> cache/ (content cache) -> local disk
"""

from .log_events.queries import LogEventsReadApi
from .log_catalog.queries import LogCatalogReadApi
from .stream_preview.queries import StreamPreviewApi

__all__ = [
    'LogEventsReadApi',
    'LogCatalogReadApi',
    'StreamPreviewApi',
]
