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
"""Shared fixtures: a controllable clock and an in-process memcached stub."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from pymemcache.exceptions import MemcacheIllegalInputError

from polycache.cache.adapters.file import FileCacheAdapter
from polycache.cache.adapters.memcache import MemcacheCacheAdapter
from polycache.cache.adapters.memory import InMemoryCache


class FakeClock:
    """Callable clock returning a settable wall-clock time."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeMemcacheServer:
    """Shared key space standing in for one memcached server."""

    def __init__(self) -> None:
        self.data: dict[str, tuple[bytes, int]] = {}
        self.reachable = True
        self.clients: list[FakeMemcacheClient] = []

    def client_factory(self, server: tuple[str, int], **kwargs: Any) -> FakeMemcacheClient:
        client = FakeMemcacheClient(self, server, **kwargs)
        self.clients.append(client)
        return client


class FakeMemcacheClient:
    """Minimal stub matching the pymemcache.client.base.Client interface.

    Values pass through the configured serde, so whatever the adapter stores
    must survive a real serialize/deserialize round trip.
    """

    def __init__(
        self,
        backend: FakeMemcacheServer,
        server: tuple[str, int],
        serde: Any = None,
        connect_timeout: float | None = None,
        timeout: float | None = None,
        allow_unicode_keys: bool = False,
    ) -> None:
        self._backend = backend
        self.server = server
        self.serde = serde
        self.connect_timeout = connect_timeout
        self.timeout = timeout
        self.allow_unicode_keys = allow_unicode_keys
        self.closed = False

    def _check_key(self, key: str) -> None:
        if len(key.encode("utf-8")) > 250 or any(c.isspace() or ord(c) < 33 for c in key):
            raise MemcacheIllegalInputError(f"Key contains whitespace or is too long: {key!r}")

    def version(self) -> bytes:
        if not self._backend.reachable:
            raise ConnectionRefusedError(111, "Connection refused")
        return b"1.6.21"

    def set(self, key: str, value: Any, expire: int = 0, noreply: bool | None = None) -> bool:
        self._check_key(key)
        self._backend.data[key] = self.serde.serialize(key, value)
        return True

    def get(self, key: str, default: Any = None) -> Any:
        self._check_key(key)
        if key not in self._backend.data:
            return default
        raw, flags = self._backend.data[key]
        return self.serde.deserialize(key, raw, flags)

    def delete(self, key: str, noreply: bool | None = None) -> bool:
        self._check_key(key)
        return self._backend.data.pop(key, None) is not None

    def flush_all(self, delay: int = 0, noreply: bool | None = None) -> bool:
        self._backend.data.clear()
        return True

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memcache_server() -> FakeMemcacheServer:
    return FakeMemcacheServer()


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture(params=["file", "memcache", "memory"])
def backend(
    request: pytest.FixtureRequest,
    clock: FakeClock,
    memcache_server: FakeMemcacheServer,
    cache_dir: Path,
) -> Any:
    """Each cache backend, wired to the fake clock."""
    if request.param == "file":
        return FileCacheAdapter({"cacheDir": str(cache_dir)}, clock=clock)
    if request.param == "memcache":
        return MemcacheCacheAdapter(clock=clock, client_factory=memcache_server.client_factory)
    return InMemoryCache(clock=clock)
