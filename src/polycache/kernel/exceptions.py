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
"""Exception hierarchy for polycache.

Missing keys are not errors and never appear here: ``get`` returns ``None``
and ``contains`` returns ``False``.
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class PolyCacheException(Exception):
    """Base exception for all polycache errors.

    Carries an optional error code and context dict for structured error data.
    Catch PolyCacheException to handle every cache error, or catch specific
    subclasses for targeted handling.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_CONNECTION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Caller Errors
# =============================================================================


class ValidationException(PolyCacheException):
    """Input validation failures."""


class InvalidConfigurationException(ValidationException):
    """Configuration is missing, not a mapping, or holds an unusable value."""


class InvalidCacheKeyException(ValidationException):
    """Key cannot be stored by the selected backend."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PolyCacheException):
    """Backing store failures: filesystem, network, cache service."""


class CacheConnectionException(InfrastructureException):
    """Connection to the cache service could not be established."""


class UnsupportedOperationException(InfrastructureException):
    """The backend does not implement the requested operation."""

    def __init__(self, backend: str, operation: str) -> None:
        super().__init__(
            f"{operation}() is not supported by the {backend} cache backend",
            code="CACHE_UNSUPPORTED_OPERATION",
            context={"backend": backend, "operation": operation},
        )
        self.backend = backend
        self.operation = operation
