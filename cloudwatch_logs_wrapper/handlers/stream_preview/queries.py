"""
Stream Preview Read API

Quick look at the most recent streams of a log group without full retrieval:
- Picks the newest N stream names from an oldest-first listing
- Fetches ONE page of at most fetch_count events from the head of each stream
- Runs those fetches on a fixed-size thread pool owned by the API instance
- Renders each page as trimmed, newline-joined messages

The first failing fetch aborts the whole batch; there is no per-stream
isolation. Bounds are validated before any request is issued.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Dict, List, Optional, Sequence, Tuple

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...exceptions import ConfigurationError, TransportError
from ...models import StreamIdentity
from ...utils import events_to_text, sort_events
from ..log_catalog import LogCatalogReadApi
from ..log_events import LogEventsReadApi

logger = logging.getLogger(__name__)


def select_recent(names: Sequence[str], stream_count: int) -> List[str]:
    """Return the last ``stream_count`` distinct names of an oldest-first sequence, newest first.

    A name listed more than once counts at its newest position.
    """
    selected: List[str] = []
    if stream_count <= 0:
        return selected
    for name in reversed(names):
        if name in selected:
            continue
        selected.append(name)
        if len(selected) == stream_count:
            break
    return selected


class StreamPreviewApi:
    """
    Read-only API producing bounded previews of several streams concurrently.

    The worker pool is created once, sized by config.preview_concurrency,
    and reused by every call. Call close() (or use the API as a context
    manager) to shut it down.
    """

    def __init__(
        self,
        config: CloudWatchLogsConfig,
        gateway: Optional[LogsGateway] = None,
        catalog: Optional[LogCatalogReadApi] = None
    ):
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)
        self.events_api = LogEventsReadApi(config, gateway=self.gateway)
        self.catalog = catalog or LogCatalogReadApi(config, gateway=self.gateway)
        self.max_workers = config.preview_concurrency
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="log-preview"
        )

    def __enter__(self) -> "StreamPreviewApi":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # a timed-out fetch may still be blocked; don't wait for it on error
        self.close(wait=exc_type is None)

    def close(self, wait: bool = True) -> None:
        """Shut down the worker pool.

        Args:
            wait: Block until running fetches finish. With False, queued
                fetches are cancelled and running ones are abandoned.
        """
        self._executor.shutdown(wait=wait, cancel_futures=not wait)

    def validate_bounds(self, fetch_count: int, stream_count: int) -> None:
        """
        Check preview bounds.

        Raises:
            ConfigurationError: If fetch_count is outside 1..preview_fetch_count_ceiling
                or stream_count is not positive
        """
        ceiling = self.config.preview_fetch_count_ceiling
        if fetch_count < 1 or fetch_count > ceiling:
            raise ConfigurationError(
                f"preview fetch count must be between 1 and {ceiling}, got {fetch_count}",
                context={'setting': 'preview_fetch_count', 'value': fetch_count, 'ceiling': ceiling}
            )
        if stream_count < 1:
            raise ConfigurationError(
                f"preview stream count must be positive, got {stream_count}",
                context={'setting': 'preview_stream_count', 'value': stream_count}
            )

    def _preview_one(self, identity: StreamIdentity, fetch_count: int) -> str:
        page = self.events_api.fetch_page(identity, limit=fetch_count)
        return events_to_text(sort_events(page.events))

    def preview(
        self,
        log_group: str,
        names: Sequence[str],
        fetch_count: Optional[int] = None,
        stream_count: Optional[int] = None
    ) -> Dict[str, str]:
        """
        Preview the most recent streams among ``names``.

        Args:
            log_group: Log group the streams belong to
            names: Stream names ordered oldest to newest
            fetch_count: Events per stream (defaults to config.preview_fetch_count)
            stream_count: Streams to preview (defaults to config.preview_stream_count)

        Returns:
            Mapping stream name -> rendered text for the selected streams

        Raises:
            ConfigurationError: If bounds are invalid (before any request)
            PreconditionError: If a selected name is malformed (before any request)
            PageFetchError: If any stream's fetch fails
            TransportError: If a fetch exceeds config.preview_timeout_seconds
        """
        fetch_count = self.config.preview_fetch_count if fetch_count is None else fetch_count
        stream_count = self.config.preview_stream_count if stream_count is None else stream_count
        self.validate_bounds(fetch_count, stream_count)

        selected = select_recent(names, stream_count)
        identities = [
            StreamIdentity(log_group=log_group, log_stream=name).validate_for_retrieval(
                self.config.reserved_stream_prefix
            )
            for name in selected
        ]
        logger.info(f"previewing {len(identities)} of {len(names)} streams in {log_group} ({fetch_count} events each)")

        futures: Dict[str, Future] = {
            identity.log_stream: self._executor.submit(self._preview_one, identity, fetch_count)
            for identity in identities
        }

        previews: Dict[str, str] = {}
        try:
            for name, future in futures.items():
                try:
                    previews[name] = future.result(timeout=self.config.preview_timeout_seconds)
                except FutureTimeoutError as e:
                    raise TransportError(
                        f"preview of {log_group}/{name} timed out after {self.config.preview_timeout_seconds}s",
                        e,
                        {'log_group': log_group, 'log_stream': name}
                    ) from e
        except Exception:
            for future in futures.values():
                future.cancel()
            raise
        return previews

    def preview_group(
        self,
        log_group: str,
        stream_count: Optional[int] = None,
        fetch_count: Optional[int] = None
    ) -> Tuple[List[str], Dict[str, str]]:
        """
        List the streams of a group and preview the most recent ones.

        Returns:
            Tuple of (selected stream names newest first, previews by name)
        """
        fetch_count = self.config.preview_fetch_count if fetch_count is None else fetch_count
        stream_count = self.config.preview_stream_count if stream_count is None else stream_count
        self.validate_bounds(fetch_count, stream_count)

        names = self.catalog.list_log_streams(log_group)
        previews = self.preview(log_group, names, fetch_count=fetch_count, stream_count=stream_count)
        return select_recent(names, stream_count), previews
