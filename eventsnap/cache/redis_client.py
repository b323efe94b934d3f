"""
Redis-backed store for revoked JWTs.

Only keys with a TTL are written; a revoked token disappears from Redis at the
moment it would have expired anyway.
"""
from typing import Optional
import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff
from redis.exceptions import RedisError
from eventsnap.core.config import settings
from eventsnap.core.logging import logger


class RedisTokenStore:
    """
    Thin wrapper over a pooled asyncio Redis client that never raises on I/O errors.

    When Redis is unreachable, lookups report "not revoked" and writes report
    failure; both are logged.
    """

    def __init__(self, url: Optional[str] = None):
        self._url = url or settings.REDIS_URL
        self._pool: Optional[aioredis.ConnectionPool] = None
        self._client: Optional[aioredis.Redis] = None

    def _get_client(self) -> aioredis.Redis:
        if self._client is None:
            self._pool = aioredis.ConnectionPool.from_url(
                self._url,
                decode_responses=True,
                max_connections=20,
                socket_connect_timeout=settings.REDIS_CONNECT_TIMEOUT,
                retry=Retry(NoBackoff(), 0),
            )
            self._client = aioredis.Redis(connection_pool=self._pool)
            logger.info("Redis connection pool created")
        return self._client

    async def add(self, key: str, ttl: int) -> bool:
        """
        Mark a key as present for ``ttl`` seconds.

        Returns:
            True if Redis accepted the write, False otherwise
        """
        try:
            await self._get_client().setex(key, ttl, "1")
            return True
        except (RedisError, OSError) as e:
            logger.error(f"Redis SETEX error for key {key}: {e}")
            return False

    async def exists(self, key: str) -> bool:
        try:
            return await self._get_client().exists(key) > 0
        except (RedisError, OSError) as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            return False

    async def close(self):
        """Close Redis connection pool."""
        if self._client:
            await self._client.aclose()
            await self._pool.disconnect()
            self._client = None
            self._pool = None
            logger.info("Redis connection pool closed")


token_store = RedisTokenStore()
