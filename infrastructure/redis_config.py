from typing import Optional
from redis.asyncio import Redis


class RedisPool:
    def __init__(self, host: str, port: int, db: int, client: Optional[Redis] = None):
        self.host = host
        self.port = port
        self.db = db
        # A ready client can be passed in (e.g. an in-process server), otherwise create_pool connects
        self.pool = client

    async def create_pool(self):
        if self.pool is None:
            self.pool = Redis(host=self.host, port=self.port, db=self.db)
        await self.pool.ping()

    async def get_connection(self) -> Redis:
        # Client bound to the shared connection pool, closing it leaves the pool open
        return self.pool.client()

    async def close_pool(self):
        await self.pool.aclose()
        self.pool = None
