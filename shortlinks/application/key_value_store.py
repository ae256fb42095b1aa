"""Key-value store protocol. Application layer depends on this; infrastructure implements it."""

from typing import Any, Callable, List, Optional, Protocol

# fn(current) -> replacement; current is None when the key is absent.
# Returning None leaves the key untouched.
UpdateFn = Callable[[Optional[Any]], Optional[Any]]


class KeyValueStore(Protocol):
    """
    Durable mapping from string key to JSON-serializable value.
    Registry and AuditLog each own a disjoint key namespace.
    """

    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None if the key does not exist."""
        ...

    async def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    async def set_if_absent(self, key: str, value: Any) -> bool:
        """Store value only if key does not exist (atomic). Returns True if written."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key. No-op if absent."""
        ...

    async def keys(self, prefix: str = "") -> List[str]:
        """Return all keys starting with prefix, in no particular order."""
        ...

    async def update(self, key: str, fn: UpdateFn) -> Optional[Any]:
        """
        Atomic read-modify-write: apply fn to the current value and store the result.
        Returns the value written, or None when fn declined to write.
        """
        ...
