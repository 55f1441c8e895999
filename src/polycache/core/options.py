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
"""Case-insensitive option holder owned by each cache backend."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from polycache.kernel.exceptions import InvalidConfigurationException


def _fold(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidConfigurationException(
            f"Option names must be strings, got {type(key).__name__}",
            code="CACHE_CONFIG_INVALID",
            context={"option": repr(key)},
        )
    return key.lower()


class CacheOptions(MutableMapping[str, Any]):
    """Mapping from lower-cased option name to value.

    ``options["cacheDir"]`` and ``options["CACHEDIR"]`` address the same
    entry; the last write wins.
    """

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if defaults:
            self.merge(defaults)

    def __getitem__(self, key: str) -> Any:
        return self._data[_fold(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[_fold(key)] = value

    def __delitem__(self, key: str) -> None:
        del self._data[_fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CacheOptions({self._data!r})"

    def merge(self, config: Mapping[str, Any] | None) -> CacheOptions:
        """Overlay *config* onto the current options.

        Raises InvalidConfigurationException if *config* is ``None`` or not a
        mapping. All names are checked before anything is written, so a bad
        config never leaves a partial merge behind.
        """
        if config is None or not isinstance(config, Mapping):
            raise InvalidConfigurationException(
                "config should be a mapping and cannot be None",
                code="CACHE_CONFIG_INVALID",
                context={"type": type(config).__name__},
            )
        folded = {_fold(k): v for k, v in config.items()}
        self._data.update(folded)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the folded options."""
        return dict(self._data)

    def get_str(self, key: str) -> str:
        return str(self[key])

    def get_int(self, key: str) -> int:
        value = self[key]
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise InvalidConfigurationException(
                f"Option '{key.lower()}' must be an integer, got {value!r}",
                code="CACHE_CONFIG_INVALID",
                context={"option": key.lower(), "value": value},
            ) from exc

    def get_float(self, key: str) -> float:
        value = self[key]
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidConfigurationException(
                f"Option '{key.lower()}' must be a number, got {value!r}",
                code="CACHE_CONFIG_INVALID",
                context={"option": key.lower(), "value": value},
            ) from exc
