from typing import List

from salon.domain.entities import Service
from salon.repositories.collection_repo import CollectionRepository


class ServiceRepository(CollectionRepository[Service]):
    """Repository for the service catalog."""

    collection_name = "services"
    entity_class = Service

    def categories(self) -> List[str]:
        """Distinct categories in order of first appearance.

        Categories are never stored separately; they are derived from services.
        """
        seen: List[str] = []
        for service in self._records:
            if service.category not in seen:
                seen.append(service.category)
        return seen

    def by_category(self, category: str) -> List[Service]:
        return [s for s in self._records if s.category == category]
