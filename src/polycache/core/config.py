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
"""Application configuration with YAML/TOML files, env vars, and dataclass binding."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__polycache_config_prefix__"

CONFIG_FILE_STEM = "polycache"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="polycache.cache")
        @dataclass
        class CacheProperties:
            provider: str = "memory"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (POLYCACHE_SECTION_KEY format)
    2. Configuration dict / YAML / TOML file values
    3. Dataclass defaults
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw configuration data."""
        return dict(self._data)

    @classmethod
    def from_sources(cls, base_dir: str | Path, load_defaults: bool = True) -> Config:
        """Load and merge config from the standard locations.

        Merge order (later wins):
        1. Packaged defaults (polycache-defaults.yaml)
        2. config/polycache.yaml or config/polycache.toml
        3. polycache.yaml or polycache.toml in *base_dir*
        """
        base_dir = Path(base_dir)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_defaults()
            sources.append("polycache-defaults.yaml (defaults)")

        for search_dir in (base_dir / "config", base_dir):
            for ext in (".yaml", ".toml"):
                candidate = search_dir / f"{CONFIG_FILE_STEM}{ext}"
                if candidate.is_file():
                    data = cls._deep_merge(data, cls._load_config_data(candidate))
                    sources.append(str(candidate))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load configuration from a single YAML or TOML file over the defaults.

        A missing file is not an error; only the defaults are loaded.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_defaults()
            sources.append("polycache-defaults.yaml (defaults)")

        if path.exists():
            data = cls._deep_merge(data, cls._load_config_data(path))
            sources.append(str(path))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        """Load config data from a YAML or TOML file."""
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_defaults() -> dict[str, Any]:
        """Load built-in defaults from polycache.resources."""
        defaults_file = importlib.resources.files("polycache.resources").joinpath("polycache-defaults.yaml")
        with importlib.resources.as_file(defaults_file) as p, open(p) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        String values containing ``${...}`` placeholders are resolved:
        - ``${ENV_VAR}`` from environment variables
        - ``${config.key}`` from other config values
        - ``${key:default}`` uses default if key/env not found
        """
        # polycache.cache.provider -> POLYCACHE_CACHE_PROVIDER
        env_base = key.removeprefix("polycache.")
        env_key = "POLYCACHE_" + env_base.upper().replace(".", "_").replace("-", "_")
        env_val = os.environ.get(env_key)
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return default
            else:
                return default

        if isinstance(current, str) and "${" in current:
            return self._resolve_placeholders(current)

        return current

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        """Resolve ``${...}`` placeholders in a string value.

        Guards against circular references with a max recursion depth.
        """
        if _depth > 10:
            raise ValueError(
                f"Max recursion depth exceeded resolving placeholders in '{value}'. Check for circular references."
            )

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)

            if ":" in inner:
                ref_key, default_val = inner.split(":", 1)
            else:
                ref_key, default_val = inner, None

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            current: Any = self._data
            for part in ref_key.split("."):
                if isinstance(current, dict):
                    current = current.get(part)
                    if current is None:
                        break
                else:
                    current = None
                    break

            if current is not None:
                resolved = str(current)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if default_val is not None:
                return cast(str, default_val)

            raise ValueError(f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def _resolve_nested(self, value: Any) -> Any:
        """Resolve placeholders in every string inside a nested dict or list."""
        if isinstance(value, dict):
            return {k: self._resolve_nested(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self._resolve_nested(v) for v in value]
        if isinstance(value, str) and "${" in value:
            return self._resolve_placeholders(value)
        return value

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a @config_properties dataclass.

        Scalar fields may be overridden by environment variables in the same
        way as :meth:`get`. Placeholders inside dict fields are resolved.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = self.get_section(prefix)

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            value = section.get(field.name)
            if isinstance(value, dict):
                value = self._resolve_nested(value)
            else:
                value = self.get(f"{prefix}.{field.name}", value)
            if value is None:
                continue
            expected_type = hints.get(field.name)
            if expected_type is int and isinstance(value, str):
                value = int(value)
            elif expected_type is float and isinstance(value, str):
                value = float(value)
            elif expected_type is bool and isinstance(value, str):
                value = value.lower() in ("true", "1", "yes")
            kwargs[field.name] = value

        return config_cls(**kwargs)
