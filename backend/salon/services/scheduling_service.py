"""
Scheduling calculator.

Derives an appointment's total duration, total amount and end time from its
selected services and start time. The calculator is pure and recomputes
everything from scratch; repositories never call it, consumers run it before
``add``/``update`` and pass the results along.

Midnight policy: an appointment must end before 24:00 on its own date.
A result that would reach or cross midnight raises ScheduleOverflowError
instead of wrapping to the next day.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from salon.core.exceptions import ScheduleOverflowError
from salon.domain.entities import Appointment, AppointmentStatus, Service
from salon.schemas.dtos import ScheduleQuote
from salon.utils.date_utils import MINUTES_PER_DAY, format_hhmm, parse_hhmm
from salon.utils.references import index_by_id
from salon.utils.values import as_amount, as_id_list

ServiceLookup = Union[Mapping[str, Service], Iterable[Service]]


def _as_lookup(services: ServiceLookup) -> Mapping[str, Service]:
    if isinstance(services, Mapping):
        return services
    return index_by_id(services)


def calculate_schedule(
    services: ServiceLookup,
    service_ids: Sequence[str],
    start_time: str,
    previous_end_time: str = "",
) -> ScheduleQuote:
    """Compute duration, amount and end time for the selected services.

    Duration and amount only depend on the selection, so they are derived even
    before a start time is chosen; the end time then stays at its previous value.
    Non-numeric durations and prices count as 0.

    Args:
        services: Current catalog (list or id -> Service mapping)
        service_ids: Selected service ids; ids that no longer resolve count as 0
        start_time: ``HH:MM`` start
        previous_end_time: Last computed end time, kept when nothing is selected
            or when no start time is set yet

    Raises:
        ScheduleOverflowError: If the appointment would end at or after midnight.
        ValueError: If start_time is not a valid ``HH:MM`` time.
    """
    service_ids = as_id_list(service_ids)
    if not service_ids:
        return ScheduleQuote(total_duration=0, total_amount=0, end_time=previous_end_time)

    lookup = _as_lookup(services)
    selected = [lookup[sid] for sid in service_ids if sid in lookup]
    total_duration = sum(as_amount(service.duration) for service in selected)
    total_amount = sum(as_amount(service.price) for service in selected)

    if not start_time:
        return ScheduleQuote(total_duration, total_amount, previous_end_time)

    end_minutes = parse_hhmm(start_time) + total_duration
    if end_minutes >= MINUTES_PER_DAY:
        raise ScheduleOverflowError(start_time, total_duration)

    return ScheduleQuote(total_duration, total_amount, format_hhmm(int(end_minutes)))


class AppointmentDraft:
    """Mutable working appointment, as edited by a booking form.

    Changing the start time, the selected services or the catalog re-derives
    duration, amount and end time from scratch.
    """

    def __init__(
        self,
        services: ServiceLookup,
        client_id: str = "",
        date: str = "",
        start_time: str = "",
        service_ids: Optional[Sequence[str]] = None,
        end_time: str = "",
        status: str = AppointmentStatus.SCHEDULED,
        notes: str = "",
    ) -> None:
        self._services = _as_lookup(services)
        self.client_id = client_id
        self.date = date
        self.start_time = start_time
        self.service_ids: List[str] = list(service_ids or [])
        self.end_time = end_time
        self.status = status
        self.notes = notes
        self.total_duration = 0
        self.total_amount: float = 0
        self._recompute()

    @classmethod
    def from_appointment(
        cls, appointment: Appointment, services: ServiceLookup
    ) -> "AppointmentDraft":
        return cls(
            services,
            client_id=appointment.client_id,
            date=appointment.date,
            start_time=appointment.start_time,
            service_ids=appointment.service_ids,
            end_time=appointment.end_time,
            status=appointment.status,
            notes=appointment.notes,
        )

    # Setters compute first so a rejected change leaves the draft untouched.

    def set_start_time(self, start_time: str) -> None:
        self._recompute(start_time=start_time)
        self.start_time = start_time

    def set_service_ids(self, service_ids: Sequence[str]) -> None:
        self._recompute(service_ids=list(service_ids))
        self.service_ids = list(service_ids)

    def refresh_services(self, services: ServiceLookup) -> None:
        lookup = _as_lookup(services)
        self._recompute(lookup=lookup)
        self._services = lookup

    def _recompute(
        self,
        start_time: Optional[str] = None,
        service_ids: Optional[List[str]] = None,
        lookup: Optional[Mapping[str, Service]] = None,
    ) -> None:
        quote = calculate_schedule(
            self._services if lookup is None else lookup,
            self.service_ids if service_ids is None else service_ids,
            self.start_time if start_time is None else start_time,
            self.end_time,
        )
        self.total_duration = quote.total_duration
        self.total_amount = quote.total_amount
        self.end_time = quote.end_time

    def to_fields(self) -> Dict[str, Any]:
        """Keyword arguments for ``add``/``update`` on the appointment repository."""
        return {
            "client_id": self.client_id,
            "date": self.date,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "service_ids": list(self.service_ids),
            "status": self.status,
            "total_amount": self.total_amount,
            "notes": self.notes,
        }
