#!/usr/bin/env python
# Client-side query cache keyed by endpoint path
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass
class QueryResult:
    """What a page renders for one key"""
    key: str
    status: QueryStatus
    data: Any = None

    @property
    def is_loading(self) -> bool:
        return self.status == QueryStatus.LOADING

    @property
    def is_empty(self) -> bool:
        return self.status == QueryStatus.EMPTY

    @property
    def items(self) -> list:
        """The data as a list; empty while loading"""
        if isinstance(self.data, list):
            return self.data
        return []


@dataclass
class CacheEntry:
    data: Any
    fetched_at: float = field(default_factory=time.time)
    stale: bool = False


def collection_key(world_id: int, collection: str) -> str:
    """Key for a world-scoped list, e.g. /api/worlds/3/creatures"""
    return f"/api/worlds/{world_id}/{collection}"


def world_key(world_id: int) -> str:
    return f"/api/worlds/{world_id}"


def region_locations_key(region_id: int) -> str:
    return f"/api/regions/{region_id}/locations"


WORLDS_KEY = "/api/worlds"


class QueryCache:
    """
    Caches GET responses by key.

    A fresh entry is served without calling the fetcher. An invalidated entry
    is refetched on the next query. A failed fetch drops the entry, so the key
    reads as LOADING until a later fetch succeeds.
    """

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}

    def query(self, key: str, fetcher: Callable[[str], Any]) -> QueryResult:
        entry = self._entries.get(key)
        if entry is None or entry.stale:
            try:
                data = fetcher(key)
            except Exception as e:
                logger.warning(f"Fetching {key} failed: {str(e)}")
                self._entries.pop(key, None)
                return QueryResult(key, QueryStatus.LOADING)
            entry = CacheEntry(data)
            self._entries[key] = entry
        return self._result(key, entry.data)

    def peek(self, key: str) -> QueryResult:
        """Read what is cached without fetching"""
        entry = self._entries.get(key)
        if entry is None:
            return QueryResult(key, QueryStatus.LOADING)
        return self._result(key, entry.data)

    def invalidate(self, key: str):
        entry = self._entries.get(key)
        if entry is not None:
            logger.debug(f"Invalidated {key}")
            entry.stale = True

    def is_stale(self, key: str) -> Optional[bool]:
        entry = self._entries.get(key)
        return None if entry is None else entry.stale

    def clear(self):
        self._entries.clear()

    @staticmethod
    def _result(key: str, data: Any) -> QueryResult:
        if data is None or (isinstance(data, list) and not data):
            return QueryResult(key, QueryStatus.EMPTY, data)
        return QueryResult(key, QueryStatus.POPULATED, data)


# Global cache shared by every service
query_cache = QueryCache()
