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
"""Option handling shared by the cache backends."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Self

from polycache.core.options import CacheOptions


class ConfigurableCache:
    """Mixin giving a backend its own case-insensitive option holder.

    Subclasses declare ``DEFAULTS`` and may override :meth:`_apply_config`,
    which runs after every successful :meth:`set_config`.
    """

    DEFAULTS: ClassVar[Mapping[str, Any]] = {}

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._options = CacheOptions(self.DEFAULTS)
        self._clock = clock
        if config is not None:
            self.set_config(config)

    @property
    def options(self) -> CacheOptions:
        return self._options

    def set_config(self, config: Mapping[str, Any]) -> Self:
        """Merge *config* into this instance's options.

        Raises InvalidConfigurationException for ``None`` or a non-mapping.
        """
        self._options.merge(config)
        self._apply_config()
        return self

    def _apply_config(self) -> None:
        """Hook for backends that act on option changes."""

    def now(self) -> float:
        return self._clock()
