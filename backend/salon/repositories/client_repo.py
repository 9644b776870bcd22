"""Client repository.

On add the store stamps ``created_at`` with the current date and starts
``last_visit`` empty; ``created_at`` can never be changed afterwards.
``last_visit`` is updated through the normal partial-update path by the
booking rule.
"""

from datetime import date
from typing import Any, Callable, Dict, Iterable, Optional

from salon.core.config import today_in_app_tz
from salon.domain.entities import Client
from salon.domain.interfaces import IRecordStore
from salon.repositories.collection_repo import CollectionRepository, new_record_id


class ClientRepository(CollectionRepository[Client]):
    """Repository for the client roster."""

    collection_name = "clients"
    entity_class = Client
    protected_on_add = ("id", "created_at", "last_visit")
    protected_on_update = ("id", "created_at")

    def __init__(
        self,
        record_store: IRecordStore,
        records: Optional[Iterable[Client]] = None,
        id_factory: Callable[[], str] = new_record_id,
        today: Callable[[], date] = today_in_app_tz,
    ) -> None:
        super().__init__(record_store, records, id_factory)
        self._today = today

    def _prepare_new(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        attributes["created_at"] = self._today().isoformat()
        attributes["last_visit"] = None
        return attributes

    def record_visit(self, client_id: str, visit_date: str) -> None:
        """Set ``last_visit`` unconditionally (last write wins)."""
        self.update(client_id, last_visit=visit_date)
