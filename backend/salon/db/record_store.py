"""
Durable record stores: one serialized JSON sequence per collection name.

Pure serialize/deserialize, no business logic. Each collection is loaded and
saved independently so a corrupted entry only affects its own collection.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from salon.core.exceptions import CorruptedCollectionError
from salon.db.base import CollectionEntry
from salon.db.session import create_tables, get_engine, get_sessionmaker
from salon.domain.interfaces import IRecordStore

logger = logging.getLogger(__name__)


def serialize_collection(records: List[Dict[str, Any]]) -> str:
    return json.dumps(records, ensure_ascii=False)


def parse_collection(collection: str, payload: str) -> List[Dict[str, Any]]:
    """Parse a stored payload into a list of record dicts.

    Raises:
        CorruptedCollectionError: If the payload is not a JSON array of objects.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise CorruptedCollectionError(collection, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise CorruptedCollectionError(
            collection, f"expected a list, got {type(data).__name__}"
        )
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise CorruptedCollectionError(
                collection, f"item {index} is {type(item).__name__}, not an object"
            )
    return data


class SqlRecordStore(IRecordStore):
    """Record store backed by the ``collections`` table through SQLAlchemy."""

    def __init__(self, engine: Optional[Engine] = None) -> None:
        self.engine = engine or get_engine()
        create_tables(self.engine)
        self._session_factory = get_sessionmaker(self.engine)

    def load(self, collection: str) -> Optional[List[Dict[str, Any]]]:
        try:
            with self._session_factory() as db:
                entry = db.get(CollectionEntry, collection)
                payload = entry.payload if entry is not None else None
        except SQLAlchemyError as e:
            raise CorruptedCollectionError(collection, f"unreadable entry ({e})") from e

        if payload is None:
            return None
        return parse_collection(collection, payload)

    def save(self, collection: str, records: List[Dict[str, Any]]) -> bool:
        try:
            payload = serialize_collection(records)
        except (TypeError, ValueError) as e:
            logger.error(
                "Collection is not serializable; skipping flush",
                extra={"context": {"collection": collection, "error": str(e)}},
            )
            return False

        try:
            with self._session_factory() as db:
                entry = db.get(CollectionEntry, collection)
                if entry is None:
                    db.add(CollectionEntry(name=collection, payload=payload))
                else:
                    entry.payload = payload
                db.commit()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to flush collection",
                extra={"context": {"collection": collection, "error": str(e)}},
                exc_info=True,
            )
            return False

        logger.debug(
            "Collection flushed",
            extra={"context": {"collection": collection, "records": len(records)}},
        )
        return True

    def delete(self, collection: str) -> bool:
        try:
            with self._session_factory() as db:
                entry = db.get(CollectionEntry, collection)
                if entry is None:
                    return False
                db.delete(entry)
                db.commit()
                return True
        except SQLAlchemyError as e:
            logger.error(
                "Failed to delete collection entry",
                extra={"context": {"collection": collection, "error": str(e)}},
            )
            return False


class InMemoryRecordStore(IRecordStore):
    """Record store keeping serialized payloads in a dict.

    Goes through the same JSON path as the SQL store so round trips behave
    identically; used by tests and throwaway sessions.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None) -> None:
        self._entries: Dict[str, str] = dict(entries or {})

    def load(self, collection: str) -> Optional[List[Dict[str, Any]]]:
        payload = self._entries.get(collection)
        if payload is None:
            return None
        return parse_collection(collection, payload)

    def save(self, collection: str, records: List[Dict[str, Any]]) -> bool:
        try:
            self._entries[collection] = serialize_collection(records)
        except (TypeError, ValueError) as e:
            logger.error(
                "Collection is not serializable; skipping flush",
                extra={"context": {"collection": collection, "error": str(e)}},
            )
            return False
        return True

    def delete(self, collection: str) -> bool:
        return self._entries.pop(collection, None) is not None

    def write_raw(self, collection: str, payload: str) -> None:
        """Store a payload verbatim, bypassing serialization."""
        self._entries[collection] = payload

    def read_raw(self, collection: str) -> Optional[str]:
        return self._entries.get(collection)
