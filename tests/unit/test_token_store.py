"""
Unit tests for the Redis revocation store.
"""
import pytest

from eventsnap.cache.redis_client import RedisTokenStore


class FakeAsyncRedis:
    """Async stand-in for redis.asyncio.Redis recording SETEX calls."""

    def __init__(self):
        self.values = {}
        self.closed = False

    async def setex(self, key, ttl, value):
        self.values[key] = (ttl, value)
        return True

    async def exists(self, key):
        return 1 if key in self.values else 0

    async def aclose(self):
        self.closed = True


class FakePool:
    def __init__(self):
        self.disconnected = False

    async def disconnect(self):
        self.disconnected = True


@pytest.mark.unit
@pytest.mark.asyncio
class TestRedisTokenStore:

    async def test_add_and_exists_await_the_client(self):
        store = RedisTokenStore("redis://localhost:6379/15")
        fake = FakeAsyncRedis()
        store._client = fake
        store._pool = FakePool()

        assert await store.add("revoked_token:abc", 120) is True

        assert fake.values["revoked_token:abc"] == (120, "1")
        assert await store.exists("revoked_token:abc") is True
        assert await store.exists("revoked_token:other") is False

    async def test_close_releases_client_and_pool(self):
        store = RedisTokenStore("redis://localhost:6379/15")
        fake, pool = FakeAsyncRedis(), FakePool()
        store._client, store._pool = fake, pool

        await store.close()

        assert fake.closed is True
        assert pool.disconnected is True

    async def test_unreachable_redis_does_not_raise(self):
        # Nothing listens on port 1; the connection is refused immediately
        store = RedisTokenStore("redis://127.0.0.1:1/0")

        assert await store.exists("revoked_token:abc") is False
        assert await store.add("revoked_token:abc", 60) is False

        await store.close()
