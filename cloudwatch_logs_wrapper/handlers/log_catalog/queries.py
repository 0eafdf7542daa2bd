"""
Log Catalog Read API

Enumerates log groups and the log streams of a group:
- DescribeLogGroups / DescribeLogStreams paged with nextToken until absent
- Hard ceiling on the number of pages (config.max_enumeration_pages)
- Group names sorted lexicographically
- Stream names ordered oldest first by creation time

Listing pages are small and cheap, and the API reliably drops nextToken on
the last page, so a token that never clears is treated as an error rather
than waited on.
"""

import logging
from typing import Callable, List, Optional, Tuple, TypeVar

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, PageCursor, create_logs_gateway
from ...exceptions import IterationLimitError, ListingFetchError, TransportError
from ...models import LogGroupSummary, LogStreamSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")

ListingPageFetcher = Callable[[Optional[str]], Tuple[List[T], Optional[str]]]


class LogCatalogReadApi:
    """
    Read-only API for listing log groups and log streams.

    All methods return complete, ordered lists; pagination is handled
    internally.
    """

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def enumerate_pages(
        self,
        operation: str,
        fetch_page: ListingPageFetcher,
        scope: Optional[str] = None
    ) -> List[T]:
        """
        Drive a listing fetcher until its continuation token is absent.

        Args:
            operation: Operation name used in logs and errors
            fetch_page: Callable taking the current token (None first) and
                returning (items, next_token)
            scope: Log group the listing is scoped to, if any

        Returns:
            Items of every page in fetch order

        Raises:
            ListingFetchError: If any page request fails
            IterationLimitError: If the token is still present after
                config.max_enumeration_pages pages
        """
        max_pages = self.config.max_enumeration_pages
        cursor = PageCursor.start()
        items: List[T] = []

        while not cursor.is_exhausted:
            if cursor.pages_fetched >= max_pages:
                logger.error(f"{operation} exceeded {max_pages} pages, last token: {cursor.token}")
                raise IterationLimitError(operation, max_pages, scope, cursor.token)
            try:
                page_items, next_token = fetch_page(cursor.request_token)
            except TransportError as e:
                context = {
                    'operation': operation,
                    'token': cursor.request_token,
                    'page_index': cursor.pages_fetched,
                }
                if scope is not None:
                    context['scope'] = scope
                raise ListingFetchError(f"{operation} failed: {e.message}", e, context, e.error_code) from e
            items.extend(page_items)
            logger.debug(f"{operation} page {cursor.pages_fetched + 1}: {len(page_items)} items, next_token: {next_token}")
            cursor = cursor.advance_listing(next_token)

        return items

    def list_log_groups(self) -> List[str]:
        """
        List all log group names, sorted lexicographically.

        Raises:
            ListingFetchError, IterationLimitError
        """
        groups: List[LogGroupSummary] = self.enumerate_pages(
            "DescribeLogGroups",
            lambda token: self.gateway.describe_log_groups(next_token=token)
        )
        return sorted(group.log_group_name for group in groups)

    def list_log_stream_summaries(self, log_group: str) -> List[LogStreamSummary]:
        """
        List the streams of a group, oldest first.

        Streams are ordered by creation time (stable, so equal creation
        times keep API order). If any stream lacks a creation time, all of
        them are ordered by name instead.
        """
        streams: List[LogStreamSummary] = self.enumerate_pages(
            "DescribeLogStreams",
            lambda token: self.gateway.describe_log_streams(log_group, next_token=token),
            scope=log_group
        )
        if all(stream.creation_time is not None for stream in streams):
            return sorted(streams, key=lambda stream: stream.creation_time)
        return sorted(streams, key=lambda stream: stream.log_stream_name)

    def list_log_streams(self, log_group: str) -> List[str]:
        """
        List the stream names of a group, oldest first.

        Args:
            log_group: Log group name

        Returns:
            Stream names; the ordering key itself is not returned

        Raises:
            ListingFetchError, IterationLimitError
        """
        return [stream.log_stream_name for stream in self.list_log_stream_summaries(log_group)]
