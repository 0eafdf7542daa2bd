"""
Cache storage backends.

The content cache only needs two operations on opaque keys, so storage is a
narrow interface:

    read(key)  -> bytes or None (absent)
    write(key, data)

Keys are two-level relative paths ("<group>/<stream>"). FileCacheStore maps
them under a root directory and replaces files atomically (temp file in the
same directory + os.replace), so a concurrent reader never sees a torn entry.
There is no locking: concurrent writers of the same key race and the last
writer wins.
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..exceptions import CacheReadError, CacheWriteError

logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """Key/bytes storage used by ContentCache."""

    @abstractmethod
    def read(self, key: str) -> Optional[bytes]:
        """Return stored bytes, or None if the key is absent.

        Raises:
            CacheReadError: If the entry exists but cannot be read
        """

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """Persist bytes under key, replacing any previous entry.

        Raises:
            CacheWriteError: If the data cannot be persisted
        """


class FileCacheStore(CacheStore):
    """Stores each key as a file under ``root``."""

    def __init__(self, root: os.PathLike):
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root.joinpath(*key.split("/"))

    def read(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheReadError(f"Failed to read cache file {path}: {e}", e, {'cache_key': key}) from e

    def write(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        tmp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
            tmp_path = Path(tmp_name)
            with os.fdopen(tmp_fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(str(tmp_path), str(path))
            tmp_path = None
        except OSError as e:
            logger.error(f"Unable to write cache file {path}: {e}")
            raise CacheWriteError(f"Unable to write cache file {path}: {e}", key, e) from e
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
        logger.info(f"wrote cache file: {path}")


class MemoryCacheStore(CacheStore):
    """In-process store, useful for tests and for disabling disk writes."""

    def __init__(self):
        self.entries: Dict[str, bytes] = {}

    def read(self, key: str) -> Optional[bytes]:
        return self.entries.get(key)

    def write(self, key: str, data: bytes) -> None:
        self.entries[key] = bytes(data)
