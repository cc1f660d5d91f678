"""Redis store for cart persistence.

Handles:
- Client lifecycle (init on startup, close on shutdown)
- Plain string get/set/delete without TTL (carts persist until cleared)

Key layout:
- Carts: {cart_namespace}:{cart_id}  (e.g. antiquebooks_cart_v1:3f2a...)
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from antiquebooks.settings import get_settings
from antiquebooks.stores.kv import StorageError

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise StorageError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Key-value operations
# ============================================================


async def kv_get(key: str) -> str | None:
    """Get a value.

    Args:
        key: Storage key.

    Returns:
        Stored value or None if not found.
    """
    try:
        return await _get_redis().get(key)
    except RedisError as e:
        raise StorageError(f"Redis GET {key} failed: {e}") from e
    except UnicodeDecodeError as e:
        raise StorageError(f"Redis GET {key} returned non-UTF-8 data: {e}") from e


async def kv_set(key: str, value: str) -> None:
    """Set a value without expiry.

    Args:
        key: Storage key.
        value: Value to store.
    """
    try:
        await _get_redis().set(key, value)
    except RedisError as e:
        raise StorageError(f"Redis SET {key} failed: {e}") from e


async def kv_delete(key: str) -> None:
    try:
        await _get_redis().delete(key)
    except RedisError as e:
        raise StorageError(f"Redis DEL {key} failed: {e}") from e


class RedisKeyValueStore:
    """`KeyValueStore` backed by the module-level Redis client."""

    async def get(self, key: str) -> str | None:
        return await kv_get(key)

    async def set(self, key: str, value: str) -> None:
        await kv_set(key, value)

    async def delete(self, key: str) -> None:
        await kv_delete(key)
