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
"""Memcached-backed cache adapter."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

import structlog
from pymemcache import serde
from pymemcache.client.base import Client
from pymemcache.exceptions import MemcacheError, MemcacheIllegalInputError

from polycache.cache.adapters.base import ConfigurableCache
from polycache.cache.types import CacheEntry
from polycache.kernel.exceptions import CacheConnectionException, InvalidCacheKeyException

logger = structlog.get_logger("polycache.cache.memcache")


class MemcacheCacheAdapter(ConfigurableCache):
    """Cache adapter that delegates to a ``pymemcache`` client.

    Memcached has no per-key age query, so every value is stored as a
    pickled :class:`CacheEntry` carrying its write time. ``get`` and
    ``contains`` therefore always fetch the whole entry.

    The connection is opened on construction and reopened on every
    :meth:`set_config`; both fail with CacheConnectionException when the
    server cannot be reached. One adapter holds one socket and must not be
    shared between threads without external locking.
    """

    DEFAULTS: ClassVar[Mapping[str, Any]] = {
        "memcachehost": "localhost",
        "memcacheport": 11211,
        "memcachetimeout": 5.0,
    }

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        clock: Callable[[], float] = time.time,
        client_factory: Callable[..., Any] = Client,
    ) -> None:
        self._client: Any = None
        self._client_factory = client_factory
        super().__init__(config, clock=clock)

        # set_config already connected if a config was supplied
        if self._client is None:
            self._connect()

    @property
    def server(self) -> tuple[str, int]:
        return self.options.get_str("memcachehost"), self.options.get_int("memcacheport")

    def _apply_config(self) -> None:
        self._connect()

    def _connect(self) -> None:
        """Open a fresh client and verify it with a ``version`` round trip."""
        self.close()
        server = self.server
        timeout = self.options.get_float("memcachetimeout")
        client = self._client_factory(
            server,
            serde=serde.pickle_serde,
            connect_timeout=timeout,
            timeout=timeout,
            allow_unicode_keys=True,
        )
        try:
            client.version()
        except (OSError, MemcacheError) as exc:
            client.close()
            raise CacheConnectionException(
                f"Could not connect to memcache server {server[0]}:{server[1]}",
                code="CACHE_CONNECTION",
                context={"host": server[0], "port": server[1]},
            ) from exc
        self._client = client
        logger.debug("memcache_connected", host=server[0], port=server[1])

    def close(self) -> None:
        """Close the underlying memcached connection."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _connected(self) -> Any:
        if self._client is None:
            host, port = self.server
            raise CacheConnectionException(
                f"Not connected to memcache server {host}:{port}",
                code="CACHE_CONNECTION",
                context={"host": host, "port": port},
            )
        return self._client

    def _fetch(self, key: str) -> CacheEntry | None:
        try:
            blob = self._connected().get(key)
        except MemcacheIllegalInputError as exc:
            raise self._illegal_key(key, exc) from exc
        if blob is None:
            return None
        if not isinstance(blob, CacheEntry):
            logger.warning("memcache_entry_unreadable", key=key, type=type(blob).__name__)
            return None
        return blob

    @staticmethod
    def _illegal_key(key: str, exc: Exception) -> InvalidCacheKeyException:
        return InvalidCacheKeyException(
            f"Key '{key}' is not a valid memcached key: {exc}",
            code="CACHE_KEY_INVALID",
            context={"key": key, "backend": "memcache"},
        )

    def put(self, key: str, value: Any) -> bool:
        """Store ``CacheEntry(now, value)``. Returns the server's stored flag."""
        try:
            return bool(self._connected().set(key, CacheEntry(self.now(), value), noreply=False))
        except MemcacheIllegalInputError as exc:
            raise self._illegal_key(key, exc) from exc

    def get(self, key: str, max_age: float = 0) -> Any | None:
        """Retrieve a value. Returns None if missing or stale."""
        entry = self._fetch(key)
        if entry is None or not entry.is_fresh(max_age, self.now()):
            return None
        return entry.value

    def contains(self, key: str, max_age: float = 0) -> bool:
        """Check whether a fresh entry exists for *key*."""
        entry = self._fetch(key)
        return entry is not None and entry.is_fresh(max_age, self.now())

    def delete(self, key: str) -> bool:
        """Remove a key. A key the server does not hold counts as success."""
        try:
            deleted = self._connected().delete(key, noreply=False)
        except MemcacheIllegalInputError as exc:
            raise self._illegal_key(key, exc) from exc
        if not deleted:
            logger.debug("memcache_delete_missing", key=key)
        return True

    def flush(self) -> bool:
        """Flush every key on the server, including other users' entries."""
        flushed = bool(self._connected().flush_all(noreply=False))
        logger.debug("memcache_flushed", host=self.server[0], port=self.server[1])
        return flushed
