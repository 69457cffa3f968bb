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
"""Session handler and key-value client protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyValueClient(Protocol):
    """Capability shape a session handler requires from its store client.

    Satisfied by ``redis.Redis``, ``redis.cluster.RedisCluster`` and any
    Redis-compatible client exposing the same five commands.
    """

    def get(self, name: Any) -> Any: ...

    def set(self, name: Any, value: Any, ex: Any = None) -> Any: ...

    def exists(self, *names: Any) -> int: ...

    def delete(self, *names: Any) -> int: ...

    def expire(self, name: Any, time: Any) -> Any: ...


@runtime_checkable
class SessionHandler(Protocol):
    """Persistence primitives invoked by a session lifecycle.

    ``do_read`` never returns ``None``: a missing session reads as ``""``.
    """

    def close(self) -> bool: ...

    def do_read(self, session_id: str) -> str | bytes: ...

    def do_write(self, session_id: str, data: str | bytes) -> bool: ...

    def do_destroy(self, session_id: str) -> bool: ...

    def gc(self, max_lifetime: int) -> bool: ...

    def update_timestamp(self, session_id: str, data: str | bytes) -> bool: ...
