"""polycache: a pluggable key-value cache with file, memcached and in-memory backends."""

__version__ = "0.1.0"

from polycache.cache import (  # noqa: E402
    CacheAdapter,
    CacheAutoConfiguration,
    CacheEntry,
    FileCacheAdapter,
    InMemoryCache,
    MemcacheCacheAdapter,
    create_cache,
)
from polycache.kernel.exceptions import (  # noqa: E402
    CacheConnectionException,
    InvalidCacheKeyException,
    InvalidConfigurationException,
    PolyCacheException,
    UnsupportedOperationException,
)

__all__ = [
    "CacheAdapter",
    "CacheAutoConfiguration",
    "CacheConnectionException",
    "CacheEntry",
    "FileCacheAdapter",
    "InMemoryCache",
    "InvalidCacheKeyException",
    "InvalidConfigurationException",
    "MemcacheCacheAdapter",
    "PolyCacheException",
    "UnsupportedOperationException",
    "__version__",
    "create_cache",
]
