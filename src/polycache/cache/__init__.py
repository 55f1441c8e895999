"""polycache cache: one interface, interchangeable storage backends."""

from polycache.cache.adapters.file import FileCacheAdapter
from polycache.cache.adapters.memcache import MemcacheCacheAdapter
from polycache.cache.adapters.memory import InMemoryCache
from polycache.cache.auto_configuration import CacheAutoConfiguration, create_cache
from polycache.cache.ports.outbound import CacheAdapter
from polycache.cache.types import CacheEntry, is_fresh

__all__ = [
    "CacheAdapter",
    "CacheAutoConfiguration",
    "CacheEntry",
    "FileCacheAdapter",
    "InMemoryCache",
    "MemcacheCacheAdapter",
    "create_cache",
    "is_fresh",
]
