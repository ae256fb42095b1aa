"""Redis-backed key-value store. Values are JSON documents; updates use WATCH/MULTI/EXEC."""

import json
import logging
from typing import Any, List, Optional

from redis.exceptions import WatchError

from shortlinks.application.exceptions import ConcurrentUpdateError
from shortlinks.application.key_value_store import UpdateFn
from shortlinks.infrastructure.store.redis_client import RedisClient

DEFAULT_MAX_UPDATE_RETRIES = 20


def _decode(raw: Optional[str]) -> Optional[Any]:
    if raw is None:
        return None
    return json.loads(raw)


class RedisKeyValueStore:
    """
    Implements KeyValueStore over Redis.
    update() is optimistic: the key is watched, fn recomputes the value, EXEC fails if another
    writer touched the key in between, and the cycle retries. fn must therefore be free of side effects.
    """

    def __init__(
        self,
        redis_client: RedisClient,
        max_update_retries: int = DEFAULT_MAX_UPDATE_RETRIES,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._redis = redis_client
        self._max_update_retries = max_update_retries
        self._logger = logger or logging.getLogger(__name__)

    async def get(self, key: str) -> Optional[Any]:
        return _decode(await self._redis.get(key))

    async def set(self, key: str, value: Any) -> None:
        await self._redis.set(key, json.dumps(value))

    async def set_if_absent(self, key: str, value: Any) -> bool:
        return await self._redis.set_nx(key, json.dumps(value))

    async def delete(self, key: str) -> None:
        await self._redis.delete_key(key)

    async def keys(self, prefix: str = "") -> List[str]:
        return await self._redis.scan_keys(f"{prefix}*")

    async def update(self, key: str, fn: UpdateFn) -> Optional[Any]:
        async with self._redis.pipeline() as pipe:
            for attempt in range(self._max_update_retries):
                try:
                    await pipe.watch(key)
                    new_value = fn(_decode(await pipe.get(key)))
                    if new_value is None:
                        return None
                    pipe.multi()
                    pipe.set(key, json.dumps(new_value))
                    await pipe.execute()
                    return new_value
                except WatchError:
                    self._logger.info("store_update_conflict", extra={"key": key, "attempt": attempt})
        raise ConcurrentUpdateError(
            f"Update of '{key}' lost to concurrent writers {self._max_update_retries} times"
        )
