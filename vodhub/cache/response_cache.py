"""Time-boxed memoization of parsed source responses."""

import json
from datetime import timedelta
from typing import List, Optional

import pendulum
from pydantic import TypeAdapter
from rich.console import Console

from ..models import Video
from .store import KeyValueStore

console = Console(stderr=True)

CACHE_NAMESPACE = "cms-cache"
CACHE_TTL = pendulum.duration(hours=3)

_videos_adapter = TypeAdapter(List[Video])


def make_cache_key(url: str, query: Optional[str] = None, category_id: Optional[str] = None) -> str:
    """Build the cache key for one source request."""
    query = (query or "").strip()
    return f"{CACHE_NAMESPACE}-{url}-{query}-{category_id or ''}"


class ResponseCache:
    """Expiring cache of parsed video lists.

    Entries are stored as JSON ``{"data": [...], "expiry": <epoch seconds>}``.
    Expiry is only checked on read; stale or corrupt entries are deleted then.
    Store failures are reported and swallowed, never raised to the caller.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get(self, key: str) -> Optional[List[Video]]:
        """Return cached videos, or None on a miss."""
        raw = self.store.get(key)
        if raw is None:
            return None

        try:
            entry = json.loads(raw)
            expiry = float(entry["expiry"])
            if pendulum.now().timestamp() > expiry:
                self._discard(key)
                return None
            return _videos_adapter.validate_python(entry["data"])
        except (ValueError, TypeError, KeyError):
            self._discard(key)
            return None

    def put(self, key: str, videos: List[Video], ttl: Optional[timedelta] = None) -> None:
        """Store videos under key, overwriting any previous entry."""
        ttl = CACHE_TTL if ttl is None else ttl
        entry = {
            "data": _videos_adapter.dump_python(videos, mode="json"),
            "expiry": pendulum.now().timestamp() + ttl.total_seconds(),
        }
        try:
            self.store.set(key, json.dumps(entry, ensure_ascii=False))
        except OSError as e:
            console.print(f"[yellow]Failed to write cache entry: {e}[/yellow]")

    def clear(self) -> int:
        """Remove every cache entry and return how many were removed."""
        keys = [k for k in self.store.keys() if k.startswith(CACHE_NAMESPACE)]
        for key in keys:
            self._discard(key)
        return len(keys)

    def size_bytes(self) -> int:
        """Approximate serialized size of all cache entries."""
        total = 0
        for key in self.store.keys():
            if key.startswith(CACHE_NAMESPACE):
                total += len((self.store.get(key) or "").encode("utf-8"))
        return total

    def _discard(self, key: str) -> None:
        try:
            self.store.remove(key)
        except OSError as e:
            console.print(f"[yellow]Failed to remove cache entry: {e}[/yellow]")
