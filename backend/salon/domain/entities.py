"""
Domain entities - Pure business records, no framework dependencies.

Attributes are snake_case; the durable, seed and HTTP representation keeps the
camelCase keys declared in each field's ``key`` metadata. Conversion never
validates or coerces values: the store persists whatever it is given.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

R = TypeVar("R", bound="Record")


class AppointmentStatus:
    """Appointment lifecycle states. Any state may be set to any other."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    ALL = (SCHEDULED, COMPLETED, CANCELLED)


class PaymentMethod:
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"

    ALL = (CASH, CARD, TRANSFER)


class PaymentStatus:
    PAID = "paid"
    PENDING = "pending"
    REFUNDED = "refunded"

    ALL = (PAID, PENDING, REFUNDED)


# Suggestions offered by the employee form; position itself is free text.
EMPLOYEE_POSITIONS = (
    "Manicurista Junior",
    "Manicurista Senior",
    "Especialista en Uñas Acrílicas",
    "Manicurista y Pedicurista",
    "Estilista de Uñas",
    "Gerente",
    "Recepcionista",
)


def _key(name: str) -> Dict[str, str]:
    return {"key": name}


def _copy_value(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    return value


class Record:
    """Mixin giving dataclass entities their dict codec."""

    id: str

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]  # type: ignore[arg-type]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the durable (camelCase) keys."""
        return {
            f.metadata.get("key", f.name): _copy_value(getattr(self, f.name))
            for f in fields(self)  # type: ignore[arg-type]
        }

    @classmethod
    def attributes_from_payload(
        cls, payload: Dict[str, Any]
    ) -> Tuple[Dict[str, Any], List[str]]:
        """Map durable keys (or attribute names) to attribute names.

        Returns the recognised attributes and the list of unrecognised keys.
        """
        by_key = {}
        for f in fields(cls):  # type: ignore[arg-type]
            by_key[f.name] = f.name
            by_key[f.metadata.get("key", f.name)] = f.name

        known: Dict[str, Any] = {}
        unknown: List[str] = []
        for key, value in payload.items():
            if key in by_key:
                known[by_key[key]] = _copy_value(value)
            else:
                unknown.append(key)
        return known, unknown

    @classmethod
    def from_dict(cls: Type[R], data: Any) -> R:
        """Build a record from its durable representation.

        Raises:
            ValueError: If data is not an object carrying a string id.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        if not isinstance(data.get("id"), str) or not data["id"]:
            raise ValueError("Record has no string id")

        kwargs = {}
        for f in fields(cls):  # type: ignore[arg-type]
            key = f.metadata.get("key", f.name)
            if key in data:
                kwargs[f.name] = _copy_value(data[key])
        return cls(**kwargs)


@dataclass
class Client(Record):
    """A customer of the business."""

    id: str = ""
    name: str = ""
    phone: str = ""
    email: str = ""
    preferred_services: List[str] = field(
        default_factory=list, metadata=_key("preferredServices")
    )
    notes: str = ""
    created_at: Optional[str] = field(default=None, metadata=_key("createdAt"))
    last_visit: Optional[str] = field(default=None, metadata=_key("lastVisit"))


@dataclass
class Service(Record):
    """A bookable item of the service catalog."""

    id: str = ""
    name: str = ""
    description: str = ""
    duration: int = 0  # minutes
    price: float = 0
    category: str = ""


@dataclass
class Appointment(Record):
    """A booking of one or more services for a client.

    ``end_time`` and ``total_amount`` are derived by the scheduling calculator
    before the appointment reaches the store; the store trusts them as given.
    """

    id: str = ""
    client_id: str = field(default="", metadata=_key("clientId"))
    date: str = ""  # YYYY-MM-DD
    start_time: str = field(default="", metadata=_key("startTime"))
    end_time: str = field(default="", metadata=_key("endTime"))
    service_ids: List[str] = field(default_factory=list, metadata=_key("serviceIds"))
    status: str = AppointmentStatus.SCHEDULED
    total_amount: float = field(default=0, metadata=_key("totalAmount"))
    notes: str = ""

    @property
    def is_completed(self) -> bool:
        return self.status == AppointmentStatus.COMPLETED


@dataclass
class Employee(Record):
    """A staff member. ``appointment_ids`` is maintained manually."""

    id: str = ""
    name: str = ""
    position: str = ""
    appointment_ids: List[str] = field(
        default_factory=list, metadata=_key("appointmentIds")
    )


@dataclass
class Transaction(Record):
    """A payment record. Persisted and listed, not read by any report."""

    id: str = ""
    appointment_id: str = field(default="", metadata=_key("appointmentId"))
    date: str = ""
    amount: float = 0
    payment_method: str = field(default=PaymentMethod.CASH, metadata=_key("paymentMethod"))
    status: str = PaymentStatus.PENDING
