# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Cache backend selection from configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from polycache.cache.adapters.file import FileCacheAdapter
from polycache.cache.adapters.memcache import MemcacheCacheAdapter
from polycache.cache.adapters.memory import InMemoryCache
from polycache.cache.ports.outbound import CacheAdapter
from polycache.config.properties.cache import CacheProperties
from polycache.core.config import Config
from polycache.kernel.exceptions import InvalidConfigurationException

logger = structlog.get_logger("polycache.cache")

PROVIDERS: dict[str, type[CacheAdapter]] = {
    "file": FileCacheAdapter,
    "memcache": MemcacheCacheAdapter,
    "memory": InMemoryCache,
}


def create_cache(provider: str, config: Mapping[str, Any] | None = None) -> CacheAdapter:
    """Construct the backend registered under *provider* (case-insensitive).

    *config* is the backend's own option mapping, e.g.
    ``{"cacheDir": "/var/cache/app"}`` for ``file``.
    """
    adapter_cls = PROVIDERS.get(provider.lower())
    if adapter_cls is None:
        raise InvalidConfigurationException(
            f"Unknown cache provider '{provider}'. Expected one of: {', '.join(sorted(PROVIDERS))}",
            code="CACHE_PROVIDER_UNKNOWN",
            context={"provider": provider},
        )
    logger.debug("cache_adapter_created", provider=provider.lower())
    return adapter_cls(config)  # type: ignore[call-arg]


class CacheAutoConfiguration:
    """Builds the cache adapter described by the ``polycache.cache`` section."""

    @staticmethod
    def properties(config: Config) -> CacheProperties:
        return config.bind(CacheProperties)

    def cache_adapter(self, config: Config) -> CacheAdapter:
        props = self.properties(config)
        return create_cache(props.provider, props.options)
