"""Cache ports."""

from polycache.cache.ports.outbound import CacheAdapter

__all__ = ["CacheAdapter"]
