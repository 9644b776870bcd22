"""
The domain store: one explicitly owned object holding all five collections.

Lifecycle: ``DataStore.open`` loads every collection from the record store
(or seeds it), every mutation flushes its collection, there is no teardown.
Nothing here is module-level state; tests build as many stores as they like.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Type

from salon.core.config import now_in_app_tz
from salon.core.exceptions import CorruptedCollectionError, UnknownCollectionError
from salon.db.seed import seed_records
from salon.domain.entities import Appointment, AppointmentStatus, Record
from salon.domain.interfaces import IRecordStore
from salon.repositories.appointment_repo import AppointmentRepository
from salon.repositories.client_repo import ClientRepository
from salon.repositories.collection_repo import CollectionRepository, new_record_id
from salon.repositories.employee_repo import EmployeeRepository
from salon.repositories.service_repo import ServiceRepository
from salon.repositories.transaction_repo import TransactionRepository
from salon.services.consistency_rules import apply_booking_side_effect

logger = logging.getLogger(__name__)


class CollectionSource:
    """Where a collection's records came from when the store was opened."""

    STORED = "stored"
    SEEDED = "seeded"
    RECOVERED = "recovered"  # stored copy was corrupted; seed used instead


COLLECTION_NAMES = ("clients", "services", "appointments", "transactions", "employees")

_ENTITY_CLASSES: Dict[str, Type[Record]] = {
    ClientRepository.collection_name: ClientRepository.entity_class,
    ServiceRepository.collection_name: ServiceRepository.entity_class,
    AppointmentRepository.collection_name: AppointmentRepository.entity_class,
    TransactionRepository.collection_name: TransactionRepository.entity_class,
    EmployeeRepository.collection_name: EmployeeRepository.entity_class,
}


@dataclass
class LoadResult:
    records: List[Record]
    source: str


def load_collection(
    record_store: IRecordStore, name: str, entity_class: Type[Record]
) -> LoadResult:
    """Load one collection, falling back to its seed when absent or corrupted.

    A failure here never affects any other collection.
    """
    try:
        raw = record_store.load(name)
        if raw is None:
            source = CollectionSource.SEEDED
            raw = seed_records(name)
        else:
            source = CollectionSource.STORED
        records = [entity_class.from_dict(item) for item in raw]
        _ensure_unique_ids(name, records)
        return LoadResult(records, source)
    except (CorruptedCollectionError, ValueError, TypeError) as e:
        logger.warning(
            "Stored collection unusable; falling back to seed data",
            extra={"context": {"collection": name, "error": str(e)}},
        )
        seeded = [entity_class.from_dict(item) for item in seed_records(name)]
        return LoadResult(seeded, CollectionSource.RECOVERED)


def _ensure_unique_ids(name: str, records: List[Record]) -> None:
    seen = set()
    for record in records:
        if record.id in seen:
            raise CorruptedCollectionError(name, f"duplicate id {record.id!r}")
        seen.add(record.id)


class DataStore:
    """Owns the five repositories and wires the cross-entity rules."""

    def __init__(
        self,
        record_store: IRecordStore,
        clients: ClientRepository,
        services: ServiceRepository,
        appointments: AppointmentRepository,
        transactions: TransactionRepository,
        employees: EmployeeRepository,
        clock: Callable[[], datetime] = now_in_app_tz,
        sources: Optional[Dict[str, str]] = None,
    ) -> None:
        self.record_store = record_store
        self.clients = clients
        self.services = services
        self.appointments = appointments
        self.transactions = transactions
        self.employees = employees
        self.clock = clock
        self.sources: Dict[str, str] = dict(sources or {})

        # Booking side effect: fires once per created appointment, never on edits
        self.appointments.subscribe_add(
            lambda appointment: apply_booking_side_effect(self.clients, appointment)
        )

    @classmethod
    def open(
        cls,
        record_store: IRecordStore,
        clock: Callable[[], datetime] = now_in_app_tz,
        id_factory: Callable[[], str] = new_record_id,
    ) -> "DataStore":
        """Initialize every collection from the record store or its seed."""

        def today() -> date:
            return clock().date()

        loaded: Dict[str, LoadResult] = {}
        for name, entity_class in _ENTITY_CLASSES.items():
            loaded[name] = load_collection(record_store, name, entity_class)

        store = cls(
            record_store,
            clients=ClientRepository(
                record_store, loaded["clients"].records, id_factory, today=today
            ),
            services=ServiceRepository(
                record_store, loaded["services"].records, id_factory
            ),
            appointments=AppointmentRepository(
                record_store, loaded["appointments"].records, id_factory
            ),
            transactions=TransactionRepository(
                record_store, loaded["transactions"].records, id_factory
            ),
            employees=EmployeeRepository(
                record_store, loaded["employees"].records, id_factory
            ),
            clock=clock,
            sources={name: result.source for name, result in loaded.items()},
        )

        # Seeded or recovered collections get a durable copy right away
        for name, result in loaded.items():
            if result.source != CollectionSource.STORED:
                store.repository(name).flush()

        logger.info(
            "Data store opened",
            extra={"context": {"sources": store.sources}},
        )
        return store

    # ----- access -----

    def repository(self, name: str) -> CollectionRepository:
        repositories: Dict[str, CollectionRepository] = {
            "clients": self.clients,
            "services": self.services,
            "appointments": self.appointments,
            "transactions": self.transactions,
            "employees": self.employees,
        }
        try:
            return repositories[name]
        except KeyError:
            raise UnknownCollectionError(name) from None

    def now(self) -> datetime:
        return self.clock()

    def today(self) -> date:
        return self.clock().date()

    def snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        """Durable representation of every collection, in order."""
        return {
            name: [record.to_dict() for record in self.repository(name).list()]
            for name in COLLECTION_NAMES
        }

    # ----- appointment operations -----

    def add_appointment(self, /, **fields: Any) -> Appointment:
        """Create an appointment; the booking rule updates the client's last visit."""
        return self.appointments.add(**fields)

    def complete_appointment(self, appointment_id: str) -> None:
        self.appointments.set_status(appointment_id, AppointmentStatus.COMPLETED)

    def cancel_appointment(self, appointment_id: str) -> None:
        self.appointments.set_status(appointment_id, AppointmentStatus.CANCELLED)

    def assign_employee(self, employee_id: str, appointment_id: str) -> None:
        """Manually link an appointment to an employee."""
        self.employees.assign_appointment(employee_id, appointment_id)

