from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel


V = TypeVar('V', bound=BaseModel)


class OrderedStoreInterface(ABC, Generic[V]):
    """
    Persistent mapping from string identifiers to records.

    values() returns records ordered by key (lexicographically), not by insertion time.
    Failures of the underlying storage are raised as StorageError.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[V]:
        raise NotImplementedError

    @abstractmethod
    async def insert(self, key: str, value: V) -> Optional[V]:
        raise NotImplementedError

    @abstractmethod
    async def remove(self, key: str) -> Optional[V]:
        raise NotImplementedError

    @abstractmethod
    async def values(self) -> list[V]:
        raise NotImplementedError
