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
"""Redis-backed session handler."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

import redis.asyncio

from pyfoundation.kernel.exceptions import InvalidArgumentException
from pyfoundation.session.ports.outbound import KeyValueClient

_logger = logging.getLogger(__name__)

DEFAULT_TTL = 86400
DEFAULT_PREFIX = "sf2s"

_SUPPORTED_OPTIONS = ("prefix", "expiretime")

_COMMANDS = ("get", "set", "exists", "delete", "expire", "execute_command")


def _is_sync_client(client: Any) -> bool:
    """Whether *client* answers the session commands without awaiting."""
    if not isinstance(client, KeyValueClient):
        return False
    if isinstance(client, (redis.asyncio.Redis, redis.asyncio.RedisCluster)):
        return False
    return not any(inspect.iscoroutinefunction(getattr(client, name, None)) for name in _COMMANDS)


class RedisSessionHandler:
    """Session handler storing opaque session blobs in Redis.

    Every session lives under ``prefix + session_id`` with the handler's TTL;
    expired sessions are evicted by Redis itself.

    Supported options:
        prefix: key prefix isolating session keys (default ``"sf2s"``).
        expiretime: time to live in seconds (default ``86400``).

    Raises:
        InvalidArgumentException: if *client* is not a Redis-compatible
            client, or *options* holds unsupported keys.
    """

    def __init__(self, client: Any, options: Mapping[str, Any] | None = None) -> None:
        if not _is_sync_client(client):
            raise InvalidArgumentException(
                "Redis or RedisCluster instance required",
                code="SESSION_CLIENT_UNSUPPORTED",
                context={"client": type(client).__name__},
            )

        options = dict(options or {})
        unsupported = [key for key in options if key not in _SUPPORTED_OPTIONS]
        if unsupported:
            raise InvalidArgumentException(
                f'The following options are not supported "{", ".join(map(str, unsupported))}"',
                code="SESSION_OPTIONS_UNSUPPORTED",
                context={"options": unsupported},
            )

        self._client = client
        self._ttl = int(options["expiretime"]) if options.get("expiretime") is not None else DEFAULT_TTL
        self._prefix = str(options["prefix"]) if options.get("prefix") is not None else DEFAULT_PREFIX
        _logger.debug("Session handler ready (prefix=%r, ttl=%ds)", self._prefix, self._ttl)

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def prefix(self) -> str:
        return self._prefix

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    def close(self) -> bool:
        """The client's lifecycle is owned by the caller; nothing to release."""
        return True

    def do_read(self, session_id: str) -> str | bytes:
        """Return the stored blob, or ``""`` when the session does not exist."""
        return self._client.get(self._key(session_id)) or ""

    def do_write(self, session_id: str, data: str | bytes) -> bool:
        """Store *data*, overwriting any previous value and resetting its TTL."""
        return bool(self._client.set(self._key(session_id), data, ex=self._ttl))

    def do_destroy(self, session_id: str) -> bool:
        """Delete a session. Destroying an unknown session succeeds."""
        key = self._key(session_id)
        if not self._client.exists(key):
            return True
        return bool(self._client.delete(key))

    def gc(self, max_lifetime: int) -> bool:
        # Redis evicts expired keys through the TTL set on write.
        return True

    def update_timestamp(self, session_id: str, data: str | bytes) -> bool:
        """Reset the session's TTL without rewriting its value."""
        return bool(self._client.expire(self._key(session_id), self._ttl))
