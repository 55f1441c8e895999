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
"""Stored entry record and the shared staleness rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def is_fresh(written_at: float, max_age: float, now: float) -> bool:
    """Return whether an entry written at *written_at* is usable at *now*.

    ``max_age == 0`` disables the age check. Otherwise the entry is fresh
    only while ``now - written_at < max_age``; an entry exactly *max_age*
    seconds old is stale.
    """
    if max_age == 0:
        return True
    return now - written_at < max_age


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A value paired with the wall-clock time it was written.

    Used by backends whose storage has no per-key timestamp of its own.
    """

    written_at: float
    value: Any

    def is_fresh(self, max_age: float, now: float) -> bool:
        return is_fresh(self.written_at, max_age, now)
