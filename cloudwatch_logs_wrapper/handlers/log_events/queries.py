"""
Log Events Read API

Full retrieval of a log stream through GetLogEvents:
- Sequential paging from the head of the stream with forward tokens
- Two end-of-stream checks: an empty page, or a forward token equal to the
  one just sent (CloudWatch keeps returning the last token at the end)
- Stable timestamp sort of the merged events
- Optional content cache in front of the full retrieval

Any failing page aborts the whole retrieval with PageFetchError; partial
streams are never returned. There is no page ceiling: an upstream that
never repeats its token and never returns an empty page is not guarded
against.
"""

import logging
from typing import List, Optional

from ...cache import ContentCache
from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, PageCursor, create_logs_gateway
from ...exceptions import PageFetchError, TransportError
from ...models import LogEvent, LogPage, StreamIdentity
from ...utils import events_to_text, sort_events

logger = logging.getLogger(__name__)


class LogEventsReadApi:
    """
    Read-only API for log stream contents.

    Each page request depends on the token of the previous response, so
    pages are fetched strictly one after another.
    """

    def __init__(
        self,
        config: CloudWatchLogsConfig,
        gateway: Optional[LogsGateway] = None,
        cache: Optional[ContentCache] = None
    ):
        """Initialize read API with configuration.

        Args:
            config: CloudWatch Logs configuration
            gateway: Gateway to share with other APIs (created from config if None)
            cache: Content cache (built from config.cache_dir if None)
        """
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)
        self.cache = cache or ContentCache.from_config(config)

    def _identity(self, log_group: str, log_stream: str) -> StreamIdentity:
        return StreamIdentity(log_group=log_group, log_stream=log_stream).validate_for_retrieval(
            self.config.reserved_stream_prefix
        )

    def fetch_page(
        self,
        identity: StreamIdentity,
        next_token: Optional[str] = None,
        limit: Optional[int] = None,
        page_index: int = 0
    ) -> LogPage:
        """
        Fetch a single window of a stream, reading from its head.

        Args:
            identity: Stream to read
            next_token: Forward token from the previous page (None for the first page)
            limit: Maximum events (defaults to config.page_limit)
            page_index: Position of this page in the retrieval, for error context

        Returns:
            LogPage

        Raises:
            PageFetchError: If the request fails
        """
        try:
            return self.gateway.get_log_events(
                identity.log_group,
                identity.log_stream,
                next_token=next_token,
                limit=limit or self.config.page_limit,
                start_from_head=True
            )
        except TransportError as e:
            logger.error(f"failed to fetch single page of logs for {identity}: {e.message}")
            raise PageFetchError(
                f"failed to fetch single page of logs: {e.message}",
                e,
                {
                    'log_group': identity.log_group,
                    'log_stream': identity.log_stream,
                    'token': next_token,
                    'page_index': page_index,
                },
                e.error_code
            ) from e

    def retrieve_all(self, identity: StreamIdentity) -> List[LogEvent]:
        """
        Fetch every event of a stream and return them sorted by timestamp.

        Args:
            identity: Stream to read

        Returns:
            All events, ascending by timestamp, ties in fetch order.
            Duplicates across pages are kept.

        Raises:
            PreconditionError: If the identity is malformed (before any request)
            PageFetchError: If any page request fails

        Examples:
            >>> events = api.retrieve_all(StreamIdentity(log_group="/aws/lambda/fn", log_stream="2024/01/01/[$LATEST]abc"))
        """
        identity.validate_for_retrieval(self.config.reserved_stream_prefix)
        logger.info(f"fetch entire log - log_group: {identity.log_group}, log_stream: {identity.log_stream}")

        cursor = PageCursor.start()
        all_events: List[LogEvent] = []

        while not cursor.is_exhausted:
            page = self.fetch_page(identity, cursor.request_token, page_index=cursor.pages_fetched)
            if page.is_empty:
                logger.debug("page size is 0, stopping")
            else:
                all_events.extend(page.events)
                logger.debug(
                    f"[{cursor.pages_fetched}] forward_token: {page.next_forward_token}, "
                    f"backward_token: {page.next_backward_token}"
                )
                logger.info(f"fetched page {cursor.pages_fetched + 1}, size: {len(page.events)}")
            cursor = cursor.advance_events(page.next_forward_token, page.is_empty)

        logger.info(f"retrieved {len(all_events)} events in {cursor.pages_fetched} pages from {identity}")
        return sort_events(all_events)

    def retrieve(
        self,
        log_group: str,
        log_stream: str,
        use_cache: Optional[bool] = None
    ) -> List[LogEvent]:
        """
        Full retrieval through the content cache.

        Args:
            log_group: Log group name
            log_stream: Log stream name
            use_cache: Override config.cache_enabled

        Returns:
            Ordered events for the stream (from cache on a hit)

        Raises:
            PreconditionError: If the identity is malformed
            PageFetchError: If retrieval fails on a cache miss
            CacheWriteError: If the retrieved events cannot be cached
        """
        identity = self._identity(log_group, log_stream)
        if use_cache is None:
            use_cache = self.config.cache_enabled
        if not use_cache:
            return self.retrieve_all(identity)
        return self.cache.get_or_fetch(identity, lambda: self.retrieve_all(identity))

    def retrieve_text(
        self,
        log_group: str,
        log_stream: str,
        use_cache: Optional[bool] = None
    ) -> str:
        """Full retrieval rendered as newline-joined, trimmed messages."""
        return events_to_text(self.retrieve(log_group, log_stream, use_cache=use_cache))
