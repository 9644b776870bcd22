"""Base repository owning one in-memory collection.

Every mutation flushes the whole collection to the record store
(write-through). Missing ids on update/delete are silent no-ops.
"""

import logging
import uuid
from dataclasses import replace
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    Type,
    TypeVar,
)

from salon.domain.entities import Record
from salon.domain.interfaces import IRecordStore, IRepository

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def new_record_id() -> str:
    return uuid.uuid4().hex


class CollectionRepository(IRepository[R]):
    """Repository for one collection of domain records."""

    collection_name: str = ""
    entity_class: Type[R]
    # Attributes callers may never set through add/update
    protected_on_add: Tuple[str, ...] = ("id",)
    protected_on_update: Tuple[str, ...] = ("id",)
    append_only: bool = False

    def __init__(
        self,
        record_store: IRecordStore,
        records: Optional[Iterable[R]] = None,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self.record_store = record_store
        self._records: List[R] = list(records or [])
        self._issued_ids: Set[str] = {record.id for record in self._records}
        self._id_factory = id_factory
        self._add_listeners: List[Callable[[R], None]] = []

    def subscribe_add(self, listener: Callable[[R], None]) -> None:
        """Run ``listener(record)`` synchronously after every successful add."""
        self._add_listeners.append(listener)

    # ----- reads -----

    def list(self) -> List[R]:
        return list(self._records)

    def get_by_id(self, record_id: str) -> Optional[R]:
        index = self._index_of(record_id)
        return self._records[index] if index is not None else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    # ----- writes -----

    def add(self, /, **fields: Any) -> R:
        attributes = self._accepted_attributes(fields, self.protected_on_add, "add")
        attributes = self._prepare_new(attributes)
        record = self.entity_class(id=self._issue_id(), **attributes)
        self._records.append(record)
        self.flush()
        logger.info(
            "Record added",
            extra={"context": {"collection": self.collection_name, "id": record.id}},
        )
        for listener in self._add_listeners:
            listener(record)
        return record

    def update(self, record_id: str, /, **partial: Any) -> None:
        index = self._index_of(record_id)
        if index is None:
            logger.debug(
                "Update ignored: id not found",
                extra={"context": {"collection": self.collection_name, "id": record_id}},
            )
            return

        attributes = self._accepted_attributes(
            partial, self.protected_on_update, "update"
        )
        self._records[index] = replace(self._records[index], **attributes)
        self.flush()
        logger.debug(
            "Record updated",
            extra={
                "context": {
                    "collection": self.collection_name,
                    "id": record_id,
                    "fields": sorted(attributes),
                }
            },
        )

    def delete(self, record_id: str) -> None:
        index = self._index_of(record_id)
        if index is None:
            logger.debug(
                "Delete ignored: id not found",
                extra={"context": {"collection": self.collection_name, "id": record_id}},
            )
            return

        del self._records[index]
        self.flush()
        logger.info(
            "Record deleted",
            extra={"context": {"collection": self.collection_name, "id": record_id}},
        )

    def flush(self) -> bool:
        """Write the whole collection to the record store."""
        return self.record_store.save(
            self.collection_name, [record.to_dict() for record in self._records]
        )

    # ----- helpers -----

    def _prepare_new(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for subclasses to stamp store-assigned attributes on add."""
        return attributes

    def _issue_id(self) -> str:
        while True:
            candidate = self._id_factory()
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def _index_of(self, record_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _accepted_attributes(
        self, payload: Dict[str, Any], protected: Tuple[str, ...], operation: str
    ) -> Dict[str, Any]:
        attributes, unknown = self.entity_class.attributes_from_payload(payload)
        ignored = unknown + [name for name in protected if name in attributes]
        for name in protected:
            attributes.pop(name, None)
        if ignored:
            logger.warning(
                f"Ignoring fields on {operation}",
                extra={
                    "context": {
                        "collection": self.collection_name,
                        "fields": sorted(ignored),
                    }
                },
            )
        return attributes
