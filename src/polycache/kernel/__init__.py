"""polycache kernel: foundation layer with zero external dependencies."""

from polycache.kernel.exceptions import (
    CacheConnectionException,
    InfrastructureException,
    InvalidCacheKeyException,
    InvalidConfigurationException,
    PolyCacheException,
    UnsupportedOperationException,
    ValidationException,
)

__all__ = [
    "CacheConnectionException",
    "InfrastructureException",
    "InvalidCacheKeyException",
    "InvalidConfigurationException",
    "PolyCacheException",
    "UnsupportedOperationException",
    "ValidationException",
]
