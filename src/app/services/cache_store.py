from abc import ABC, abstractmethod
from typing import Optional

from src.core.result import Result


class CacheStore(ABC):
    """
    Bucketed key-value cache - application layer port.

    Values live under a two-level key: a bucket (namespace) and a field
    inside it. Each bucket carries a single TTL that is refreshed by every
    write to any of its fields, so fields in one bucket share an expiry.

    Operations never raise on backend failure; they return an error Result
    and leave the fail-open or fail-closed decision to the caller.
    """

    @abstractmethod
    async def set(self, bucket: str, field: str, value: str) -> Result[None]:
        """Write a field and refresh the bucket TTL"""
        pass

    @abstractmethod
    async def get(self, bucket: str, field: str) -> Result[Optional[str]]:
        """Read a field; ok(None) when the bucket or field is absent"""
        pass

    @abstractmethod
    async def delete(self, bucket: str, field: str) -> Result[None]:
        """Remove a single field; the bucket itself is left in place"""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Health check against the backend"""
        pass
