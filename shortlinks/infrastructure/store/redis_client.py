# shortlinks/infrastructure/store/redis_client.py

from typing import Optional

import redis.asyncio as redis

from shortlinks.config.settings import settings


class RedisClient:
    def __init__(self, url: Optional[str] = None):
        self.client = redis.from_url(
            url or settings.redis_url,
            decode_responses=True,
        )

    async def get(self, key: str) -> str | None:
        """Get value for key. Returns None if key does not exist."""
        return await self.client.get(key)

    async def set(self, key: str, value: str) -> None:
        await self.client.set(key, value)

    async def set_nx(self, key: str, value: str) -> bool:
        """Set key to value only if not exists. Returns True if key was set."""
        return bool(await self.client.set(key, value, nx=True))

    async def delete_key(self, key: str) -> None:
        """Delete a key."""
        await self.client.delete(key)

    async def scan_keys(self, pattern: str) -> list[str]:
        """Collect keys matching a glob pattern using SCAN (non-blocking on the server)."""
        return [key async for key in self.client.scan_iter(match=pattern)]

    def pipeline(self):
        """Transactional pipeline for WATCH/MULTI/EXEC optimistic updates."""
        return self.client.pipeline(transaction=True)

    async def close(self) -> None:
        await self.client.aclose()
