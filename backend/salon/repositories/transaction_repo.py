from typing import Any

from salon.core.exceptions import AppendOnlyCollectionError
from salon.domain.entities import Transaction
from salon.repositories.collection_repo import CollectionRepository


class TransactionRepository(CollectionRepository[Transaction]):
    """Repository for payment transactions.

    Transactions are only added and listed; no workflow reads them yet.
    ``update`` and ``delete`` raise AppendOnlyCollectionError.
    """

    collection_name = "transactions"
    entity_class = Transaction
    append_only = True

    def update(self, record_id: str, /, **partial: Any) -> None:
        raise AppendOnlyCollectionError(self.collection_name, "update")

    def delete(self, record_id: str) -> None:
        raise AppendOnlyCollectionError(self.collection_name, "delete")
