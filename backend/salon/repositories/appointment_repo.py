"""Appointment repository.

The store never recomputes ``end_time`` or ``total_amount``: callers run the
scheduling calculator first and pass the results along. Any status may be set
to any other through ``update``.
"""

from typing import List

from salon.domain.entities import Appointment, AppointmentStatus
from salon.repositories.collection_repo import CollectionRepository


class AppointmentRepository(CollectionRepository[Appointment]):
    """Repository for appointments."""

    collection_name = "appointments"
    entity_class = Appointment

    def by_status(self, status: str) -> List[Appointment]:
        return [a for a in self._records if a.status == status]

    def by_client(self, client_id: str) -> List[Appointment]:
        return [a for a in self._records if a.client_id == client_id]

    def completed(self) -> List[Appointment]:
        return self.by_status(AppointmentStatus.COMPLETED)

    def set_status(self, appointment_id: str, status: str) -> None:
        self.update(appointment_id, status=status)
