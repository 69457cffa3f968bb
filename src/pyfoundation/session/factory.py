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
"""Session handler factory driven by ``pyfoundation.session.*`` configuration."""

from __future__ import annotations

import logging
from typing import Any

from pyfoundation.config.properties.session import SessionProperties
from pyfoundation.core.config import Config
from pyfoundation.kernel.exceptions import InvalidArgumentException
from pyfoundation.session.adapters.redis import RedisSessionHandler
from pyfoundation.session.ports.outbound import SessionHandler

_logger = logging.getLogger(__name__)


def _redis_client(properties: SessionProperties) -> Any:
    if properties.redis_cluster:
        from redis.cluster import RedisCluster

        return RedisCluster.from_url(properties.redis_url)

    import redis

    return redis.Redis.from_url(properties.redis_url)


def create_session_handler(config: Config) -> SessionHandler:
    """Build a session handler for the configured store.

    ``store: redis`` connects lazily to ``redis-url`` (a cluster when
    ``redis-cluster`` is true); ``store: memory`` keeps sessions in-process.
    """
    properties = config.bind(SessionProperties)
    store = str(properties.store).lower()

    client: Any
    if store == "redis":
        client = _redis_client(properties)
    elif store == "memory":
        from pyfoundation.session.adapters.memory import InMemoryKeyValueClient

        client = InMemoryKeyValueClient()
    else:
        raise InvalidArgumentException(
            f"Unsupported session store '{properties.store}'",
            code="SESSION_STORE_UNSUPPORTED",
            context={"store": properties.store},
        )

    _logger.info("Using %s session store with prefix '%s'", store, properties.prefix)
    return RedisSessionHandler(client, properties.handler_options())
