"""Key-value persistence contract used by the cart store."""

from typing import Protocol


class StorageError(RuntimeError):
    """Raised by key-value stores when the backend cannot be read or written."""


class KeyValueStore(Protocol):
    """Durable string store addressed by key."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...
