"""
Content Cache for fully retrieved log streams.

Maps a StreamIdentity to the complete, merged event list of that stream,
persisted through a CacheStore. Behaviour:

- Hit: the stored entry is returned as-is. No fetch, no write, no freshness
  check. Entries are never invalidated; delete the file to refresh.
- Miss (absent, unreadable or undecodable entry): the fetch function runs,
  its result is written back and then returned.
- A failed write after a successful fetch raises CacheWriteError.

Cache keys are ``sanitize(group)/sanitize(stream)`` where every
non-alphanumeric character becomes '_'. This is NOT collision-free:
('grp', 'a/b') and ('grp', 'a.b') share the key 'grp/a_b', and the second
identity is served the first one's cached events. Changing the encoding
would orphan existing cache directories, so it is kept as-is.
"""

import logging
from typing import Callable, List, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..config import CloudWatchLogsConfig
from ..exceptions import CacheReadError
from ..models import LogEvent, StreamIdentity
from ..utils import sanitize_path_component
from .store import CacheStore, FileCacheStore

logger = logging.getLogger(__name__)

_EVENTS_ADAPTER = TypeAdapter(List[LogEvent])


def cache_key_for(identity: StreamIdentity) -> str:
    """Two-level cache key for a stream identity (see module docstring)."""
    return f"{sanitize_path_component(identity.log_group)}/{sanitize_path_component(identity.log_stream)}"


def serialize_events(events: List[LogEvent]) -> bytes:
    """Serialize events as a JSON array in the GetLogEvents wire format."""
    return _EVENTS_ADAPTER.dump_json(events, by_alias=True)


def deserialize_events(data: bytes) -> List[LogEvent]:
    return _EVENTS_ADAPTER.validate_json(data)


class ContentCache:
    """Write-once-per-key cache of merged log streams."""

    def __init__(self, store: CacheStore):
        self.store = store

    @classmethod
    def from_config(cls, config: CloudWatchLogsConfig) -> "ContentCache":
        return cls(FileCacheStore(config.cache_dir))

    def lookup(self, identity: StreamIdentity) -> Optional[List[LogEvent]]:
        """Return cached events for identity, or None on a miss.

        Read and decode failures count as misses.
        """
        key = cache_key_for(identity)
        try:
            data = self.store.read(key)
        except CacheReadError as e:
            logger.warning(f"cache read failed for {identity}, treating as miss: {e}")
            return None
        if data is None:
            return None
        try:
            return deserialize_events(data)
        except PydanticValidationError as e:
            logger.warning(f"cache entry {key} is not decodable, treating as miss: {e}")
            return None

    def get_or_fetch(
        self,
        identity: StreamIdentity,
        fetch_fn: Callable[[], List[LogEvent]]
    ) -> List[LogEvent]:
        """
        Return the cached events for identity, fetching and storing them on a miss.

        Args:
            identity: Stream to look up
            fetch_fn: Produces the authoritative event list (usually a full retrieval)

        Returns:
            Ordered events for the stream

        Raises:
            CacheWriteError: If the fetched events cannot be persisted
            Any exception raised by fetch_fn, unchanged
        """
        cached = self.lookup(identity)
        if cached is not None:
            logger.info(f"using cached data for {identity} ({len(cached)} events)")
            return cached

        logger.info(f"no cached data found for {identity}, fetching")
        events = fetch_fn()
        self.store.write(cache_key_for(identity), serialize_events(events))
        return events
