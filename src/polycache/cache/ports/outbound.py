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
"""Cache adapter protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheAdapter(Protocol):
    """Abstract cache interface.

    All cache backends (file, memcached, in-memory) implement this protocol.
    ``max_age`` is in seconds; ``0`` returns an entry regardless of age.
    """

    def put(self, key: str, value: Any) -> bool: ...

    def get(self, key: str, max_age: float = 0) -> Any | None: ...

    def contains(self, key: str, max_age: float = 0) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def flush(self) -> bool: ...
