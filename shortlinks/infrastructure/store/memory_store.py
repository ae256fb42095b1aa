"""In-process key-value store. Default backend for a single process and for tests."""

import asyncio
import json
from typing import Any, Dict, List, Optional

from shortlinks.application.key_value_store import UpdateFn


class InMemoryKeyValueStore:
    """
    Implements KeyValueStore with a dict of JSON strings, so stored values are
    JSON-serializable and callers never share mutable state with the store.
    Writes are serialised by an asyncio.Lock.
    """

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    def _load(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    async def get(self, key: str) -> Optional[Any]:
        return self._load(key)

    async def set(self, key: str, value: Any) -> None:
        async with self._lock:
            self._data[key] = json.dumps(value)

    async def set_if_absent(self, key: str, value: Any) -> bool:
        async with self._lock:
            if key in self._data:
                return False
            self._data[key] = json.dumps(value)
            return True

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._data.pop(key, None)

    async def keys(self, prefix: str = "") -> List[str]:
        return [k for k in self._data if k.startswith(prefix)]

    async def update(self, key: str, fn: UpdateFn) -> Optional[Any]:
        async with self._lock:
            new_value = fn(self._load(key))
            if new_value is None:
                return None
            self._data[key] = json.dumps(new_value)
            return json.loads(self._data[key])
