import logging
from typing import Generic, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError as PydanticValidationError
from redis.exceptions import RedisError
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.ordered_store import OrderedStoreInterface
from app.domain.exceptions import StorageError


logger = logging.getLogger('storage')

V = TypeVar('V', bound=BaseModel)


class RedisOrderedStore(OrderedStoreInterface[V], Generic[V]):
    """
    Ordered store on top of Redis.

    Every record lives under '<namespace>:<id>' as JSON. The ids themselves are kept in the
    sorted set 'index:<namespace>' with score 0, so ZRANGEBYLEX walks them in lexicographic order.
    Record and index are always changed in one MULTI/EXEC block.
    """

    def __init__(self, redis_pool: RedisPool, namespace: str, model: Type[V]):
        self.redis_pool = redis_pool
        self.namespace = namespace
        self.model = model

    def _record_key(self, key: str) -> str:
        return f'{self.namespace}:{key}'

    @property
    def _index_key(self) -> str:
        return f'index:{self.namespace}'

    def _decode(self, data: Optional[bytes]) -> Optional[V]:
        if data is None:
            return None
        try:
            return self.model.model_validate_json(data)
        except PydanticValidationError as e:
            logger.error(f"Corrupted record in '{self.namespace}': {e}")
            raise StorageError(f"Couldn't decode a record from '{self.namespace}' storage.") from e

    def _decode_replaced(self, data: Optional[bytes]) -> Optional[V]:
        # The write is already committed here, an unreadable old value must not turn it into a failure
        try:
            return self._decode(data)
        except StorageError:
            return None

    async def get(self, key: str) -> Optional[V]:
        try:
            async with await self.redis_pool.get_connection() as conn:
                data = await conn.get(self._record_key(key))
        except RedisError as e:
            raise StorageError(f"Error reading {key} from '{self.namespace}' storage: {e}") from e
        return self._decode(data)

    async def insert(self, key: str, value: V) -> Optional[V]:
        try:
            async with await self.redis_pool.get_connection() as conn:
                async with conn.pipeline(transaction=True) as pipe:
                    # Is used both for creating and replacing a record
                    pipe.get(self._record_key(key))
                    pipe.set(self._record_key(key), value.model_dump_json())
                    pipe.zadd(self._index_key, {key: 0})
                    previous, _, _ = await pipe.execute()
        except RedisError as e:
            raise StorageError(f"Error inserting {key} into '{self.namespace}' storage: {e}") from e
        return self._decode_replaced(previous)

    async def remove(self, key: str) -> Optional[V]:
        try:
            async with await self.redis_pool.get_connection() as conn:
                async with conn.pipeline(transaction=True) as pipe:
                    pipe.get(self._record_key(key))
                    pipe.delete(self._record_key(key))
                    pipe.zrem(self._index_key, key)
                    removed, _, _ = await pipe.execute()
        except RedisError as e:
            raise StorageError(f"Error removing {key} from '{self.namespace}' storage: {e}") from e
        return self._decode_replaced(removed)

    async def values(self) -> list[V]:
        try:
            async with await self.redis_pool.get_connection() as conn:
                keys = await conn.zrangebylex(self._index_key, '-', '+')
                if not keys:
                    return []
                ids = [key.decode() if isinstance(key, bytes) else key for key in keys]
                records = await conn.mget([self._record_key(key) for key in ids])
        except RedisError as e:
            raise StorageError(f"Error listing '{self.namespace}' storage: {e}") from e
        # The index and the records are written together, a missing record would mean manual tampering
        return [self._decode(data) for data in records if data is not None]
