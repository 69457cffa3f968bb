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
"""In-memory, Redis-compatible key-value client with TTL-based expiry."""

from __future__ import annotations

import threading
import time
from typing import Any


class InMemoryKeyValueClient:
    """Process-local stand-in for a Redis client.

    Implements the commands a session handler issues, with ``redis-py``
    return conventions. Expired entries are dropped lazily on access.
    Suitable for development, testing, and single-process applications.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.Lock()

    def _live_entry(self, name: str) -> tuple[Any, float | None] | None:
        entry = self._store.get(name)
        if entry is None:
            return None
        _, expires_at = entry
        if expires_at is not None and _now() >= expires_at:
            del self._store[name]
            return None
        return entry

    def get(self, name: str) -> Any | None:
        """Return the value stored at *name*, or ``None`` if missing or expired."""
        with self._lock:
            entry = self._live_entry(name)
            return None if entry is None else entry[0]

    def set(self, name: str, value: Any, ex: int | None = None) -> bool:
        """Store *value*, expiring after *ex* seconds when given."""
        with self._lock:
            expires_at = _now() + ex if ex is not None else None
            self._store[name] = (value, expires_at)
            return True

    def exists(self, *names: str) -> int:
        """Count how many of *names* exist."""
        with self._lock:
            return sum(1 for name in names if self._live_entry(name) is not None)

    def delete(self, *names: str) -> int:
        """Remove *names* and return how many existed."""
        with self._lock:
            count = 0
            for name in names:
                if self._live_entry(name) is not None:
                    del self._store[name]
                    count += 1
            return count

    def expire(self, name: str, time: int) -> bool:
        """Reset the TTL of *name*. Returns ``False`` when the key is missing."""
        with self._lock:
            entry = self._live_entry(name)
            if entry is None:
                return False
            self._store[name] = (entry[0], _now() + time)
            return True

    def ttl(self, name: str) -> int:
        """Remaining seconds for *name*: ``-2`` if missing, ``-1`` if persistent."""
        with self._lock:
            entry = self._live_entry(name)
            if entry is None:
                return -2
            expires_at = entry[1]
            if expires_at is None:
                return -1
            return max(0, round(expires_at - _now()))


def _now() -> float:
    return time.monotonic()
