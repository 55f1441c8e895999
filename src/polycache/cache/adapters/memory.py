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
"""Volatile in-process cache adapter."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import Any

from polycache.cache.adapters.base import ConfigurableCache
from polycache.cache.types import CacheEntry


class InMemoryCache(ConfigurableCache):
    """Cache held in a dict owned by this instance.

    Entries last only as long as the instance. Suitable for development,
    testing, and single-process applications. Stale entries stay in the
    dict until overwritten, deleted, or flushed.
    """

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store: dict[str, CacheEntry] = {}
        super().__init__(config, clock=clock)

    def put(self, key: str, value: Any) -> bool:
        """Store a value, replacing any existing entry."""
        self._store[key] = CacheEntry(self.now(), value)
        return True

    def get(self, key: str, max_age: float = 0) -> Any | None:
        """Get a value by key. Returns None if missing or stale."""
        entry = self._store.get(key)
        if entry is None or not entry.is_fresh(max_age, self.now()):
            return None
        return entry.value

    def contains(self, key: str, max_age: float = 0) -> bool:
        """Check if a key exists and is fresh."""
        entry = self._store.get(key)
        return entry is not None and entry.is_fresh(max_age, self.now())

    def delete(self, key: str) -> bool:
        """Remove a key. Succeeds whether or not the key existed."""
        self._store.pop(key, None)
        return True

    def flush(self) -> bool:
        """Remove all entries."""
        self._store.clear()
        return True

    def size(self) -> int:
        """Number of stored entries, stale ones included."""
        return len(self._store)
