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
"""Filesystem-backed cache adapter."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

import structlog

from polycache.cache.adapters.base import ConfigurableCache
from polycache.cache.types import is_fresh
from polycache.kernel.exceptions import InvalidCacheKeyException, UnsupportedOperationException

logger = structlog.get_logger("polycache.cache.file")


class FileCacheAdapter(ConfigurableCache):
    """Cache adapter storing each value as a file under ``cachedir``.

    The key is a path relative to the root, so ``/`` in a key creates
    sub-directories. The file's modification time is the write timestamp,
    so nothing besides the raw value bytes is stored.

    Writers are not locked against each other; concurrent ``put`` calls on
    the same key race and the last completed write wins.
    """

    DEFAULTS: ClassVar[Mapping[str, Any]] = {"cachedir": "./cache/"}

    @property
    def root(self) -> Path:
        """Root directory holding the cached files. Created on first ``put``."""
        return Path(self.options.get_str("cachedir"))

    def _path_for(self, key: str) -> Path:
        if not isinstance(key, str) or not key:
            raise InvalidCacheKeyException(
                "Cache keys must be non-empty strings",
                code="CACHE_KEY_INVALID",
                context={"key": repr(key), "backend": "file"},
            )
        # Empty, "." and ".." segments would alias another key's file or
        # escape the root, so they are rejected rather than normalised.
        segments = key.replace(os.sep, "/").split("/")
        if os.path.isabs(key) or "\x00" in key or any(s in ("", ".", "..") for s in segments):
            raise InvalidCacheKeyException(
                f"Key '{key}' is not a plain relative path",
                code="CACHE_KEY_INVALID",
                context={"key": key, "backend": "file"},
            )
        return self.root.joinpath(*segments)

    def put(self, key: str, value: bytes | str) -> bool:
        """Write *value* to ``cachedir/key``, replacing any existing file.

        ``str`` values are stored UTF-8 encoded; ``get`` always returns bytes.
        """
        if isinstance(value, str):
            data = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            data = bytes(value)
        else:
            raise TypeError(f"FileCacheAdapter stores bytes or str, got {type(value).__name__}")

        path = self._path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except (FileExistsError, NotADirectoryError, IsADirectoryError) as exc:
            # A stored entry sits where a directory is needed, or the reverse.
            raise InvalidCacheKeyException(
                f"Key '{key}' conflicts with an existing entry",
                code="CACHE_KEY_CONFLICT",
                context={"key": key, "backend": "file"},
            ) from exc
        return True

    def get(self, key: str, max_age: float = 0) -> bytes | None:
        """Return the stored bytes, or None if missing or stale."""
        if not self.contains(key, max_age):
            return None
        try:
            return self._path_for(key).read_bytes()
        except FileNotFoundError:
            # Deleted between the freshness check and the read.
            return None

    def contains(self, key: str, max_age: float = 0) -> bool:
        """Check existence and, when *max_age* is set, the file's mtime."""
        path = self._path_for(key)
        try:
            stat = path.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        if not path.is_file():
            return False
        return is_fresh(stat.st_mtime, max_age, self.now())

    def delete(self, key: str) -> bool:
        """Remove the file for *key*. An absent file counts as success."""
        path = self._path_for(key)
        # A directory at the key's path is not an entry.
        if not path.is_file():
            return True
        try:
            path.unlink()
        except (FileNotFoundError, NotADirectoryError):
            return True
        logger.debug("cache_entry_deleted", backend="file", key=key)
        return True

    def flush(self) -> bool:
        """Not supported: the file backend has no recursive clear."""
        raise UnsupportedOperationException(backend="file", operation="flush")
