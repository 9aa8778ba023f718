"""Expiring response cache and its key-value stores."""

from .response_cache import CACHE_NAMESPACE, CACHE_TTL, ResponseCache, make_cache_key
from .store import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "CACHE_NAMESPACE",
    "CACHE_TTL",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "ResponseCache",
    "make_cache_key",
]
