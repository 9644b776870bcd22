"""
Abstract interfaces following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRecordStore(ABC):
    """Key-value medium holding one serialized sequence per collection."""

    @abstractmethod
    def load(self, collection: str) -> Optional[List[Dict[str, Any]]]:
        """Return the stored records, or None when nothing is stored.

        Raises:
            CorruptedCollectionError: If the stored entry cannot be parsed.
        """
        pass

    @abstractmethod
    def save(self, collection: str, records: List[Dict[str, Any]]) -> bool:
        """Persist the whole collection. Best-effort; returns success."""
        pass

    @abstractmethod
    def delete(self, collection: str) -> bool:
        """Remove the stored entry so the next load falls back to seed data."""
        pass


class IRepositoryReader(ABC, Generic[T]):
    """Interface for collection read operations."""

    @abstractmethod
    def list(self) -> List[T]:
        """All records in insertion order."""
        pass

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional[T]:
        """Record by id, or None when it does not resolve."""
        pass


class IRepositoryWriter(ABC, Generic[T]):
    """Interface for collection write operations."""

    @abstractmethod
    def add(self, **fields: Any) -> T:
        """Create a record with a freshly issued id."""
        pass

    @abstractmethod
    def update(self, record_id: str, **partial: Any) -> None:
        """Shallow-merge the given fields; no-op for an unknown id."""
        pass

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Hard delete; no-op for an unknown id."""
        pass


class IRepository(IRepositoryReader[T], IRepositoryWriter[T]):
    """Complete repository interface combining read/write operations."""

    pass
