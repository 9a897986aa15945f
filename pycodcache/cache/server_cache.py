"""
Server Cache - loads servercache.dat and enumerates its server entries

Usage:
    cache = ServerCache("C:/Games/Call of Duty 4/servercache.dat")
    for server in cache.servers:
        print(f"{server.name}: {server.address}")
"""

import logging
import os
from dataclasses import replace
from typing import Iterator, List, Optional, Union

from .. import constants
from ..config import CacheConfig
from ..errors import InvalidSizeError, PathNotFoundError
from .models import ServerRecord
from .record import CachedServerSlot, iter_slots, unique_records

logger = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']


class ServerCache:
    """A loaded, size-checked Call of Duty 4 server cache.

    The file is read into memory once and never modified. Every property
    re-derives its results from that buffer, so iterating twice gives the
    same records in the same order.
    """

    def __init__(self, path: PathLike, config: Optional[CacheConfig] = None):
        """Load a cache file from disk.

        Args:
            path: Path to servercache.dat
            config: Layout and decoding settings (default: CacheConfig()).
                The cache keeps its own copy, later changes to config have
                no effect on it.

        Raises:
            PathNotFoundError: If path does not exist
            InvalidSizeError: If the file is not exactly config.file_size bytes
        """
        if path is None:
            raise TypeError("path must not be None")

        if not os.path.isfile(path):
            raise PathNotFoundError(f"path not found: {path}")

        with open(path, 'rb') as f:
            contents = f.read()

        self._load(contents, os.fspath(path), config)
        logger.info(f"Loaded server cache from {self.path} ({len(contents)} bytes)")

    @classmethod
    def from_bytes(cls, data: bytes, config: Optional[CacheConfig] = None) -> 'ServerCache':
        """Build a cache from bytes already in memory"""
        cache = cls.__new__(cls)
        cache._load(bytes(data), None, config)
        return cache

    def _load(self, contents: bytes, path: Optional[str], config: Optional[CacheConfig]):
        self._config = replace(config or CacheConfig()).validate()

        if len(contents) != self._config.file_size:
            source = path or '<memory>'
            logger.error(f"Rejected {source}: {len(contents)} bytes, "
                         f"expected {self._config.file_size}")
            raise InvalidSizeError(source, self._config.file_size, len(contents))

        self.path = path
        self._data = contents

    @property
    def config(self) -> CacheConfig:
        """Copy of the settings this cache was loaded with"""
        return replace(self._config)

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def header(self) -> bytes:
        """Raw header bytes, passed through unparsed"""
        return self._data[:self._config.header_size]

    @property
    def favorite_count(self) -> int:
        """Number of favorites recorded in the header"""
        return self._data[self._config.favorite_count_offset]

    def _region_slots(self, start: int, count: int) -> Iterator[CachedServerSlot]:
        for slot in iter_slots(self._data, start, count, constants.SLOT_SIZE):
            if slot.is_sentinel():
                continue
            if self._config.skip_blank_slots and slot.is_blank():
                continue
            yield slot

    def public_slots(self) -> Iterator[CachedServerSlot]:
        """Yield the non-empty slots of the public server region"""
        return self._region_slots(self._config.public_server_offset,
                                  self._config.public_server_count)

    def favorite_slots(self) -> Iterator[CachedServerSlot]:
        """Yield the non-empty slots of the favorite server region"""
        count = self._config.favorite_server_count
        if self._config.honor_favorite_count:
            count = min(count, self.favorite_count)
        return self._region_slots(self._config.favorite_server_offset, count)

    def _decode(self, slots: Iterator[CachedServerSlot]) -> Iterator[ServerRecord]:
        records = (slot.decode() for slot in slots)
        if self._config.deduplicate:
            records = unique_records(records)
        return records

    def iter_servers(self) -> Iterator[ServerRecord]:
        """Lazily decode the public server region"""
        return self._decode(self.public_slots())

    def iter_favorite_servers(self) -> Iterator[ServerRecord]:
        """Lazily decode the favorite server region"""
        return self._decode(self.favorite_slots())

    @property
    def servers(self) -> List[ServerRecord]:
        """Decoded public servers, duplicates removed"""
        return list(self.iter_servers())

    @property
    def favorite_servers(self) -> List[ServerRecord]:
        """Decoded favorite servers, duplicates removed"""
        return list(self.iter_favorite_servers())

    def __repr__(self) -> str:
        return f"ServerCache(path={self.path!r}, size={self.size})"
