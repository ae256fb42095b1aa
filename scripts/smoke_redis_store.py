# scripts/smoke_redis_store.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio

from shortlinks.infrastructure.store.redis_client import RedisClient
from shortlinks.infrastructure.store.redis_store import RedisKeyValueStore


async def main():
    client = RedisClient()
    store = RedisKeyValueStore(client)

    result1 = await store.set_if_absent("smoke:link", {"code": "smoke"})
    result2 = await store.set_if_absent("smoke:link", {"code": "smoke"})
    counter = await store.update("smoke:counter", lambda v: (v or 0) + 1)

    print("First insert:", result1)
    print("Second insert:", result2)
    print("Counter after update:", counter)

    await store.delete("smoke:link")
    await client.close()

asyncio.run(main())
