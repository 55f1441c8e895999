"""Typed configuration properties bound from :class:`~polycache.core.config.Config`."""

from polycache.config.properties.cache import CacheProperties
from polycache.config.properties.logging import LoggingProperties

__all__ = ["CacheProperties", "LoggingProperties"]
