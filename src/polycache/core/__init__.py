"""polycache core: application configuration and the backend option holder."""

from polycache.core.config import Config, config_properties
from polycache.core.options import CacheOptions

__all__ = ["CacheOptions", "Config", "config_properties"]
