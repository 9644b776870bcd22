"""Filtering helpers used by list screens."""

from typing import Iterable, List, Optional

from salon.domain.entities import Appointment, Client, Employee, Service

ALL_STATUSES = "all"


def _normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def _contains(value, query: str) -> bool:
    return isinstance(value, str) and query in value.lower()


def search_clients(clients: Iterable[Client], query: Optional[str]) -> List[Client]:
    """Case-insensitive match on name or email; phone matches as typed."""
    raw = (query or "").strip()
    q = raw.lower()
    if not q:
        return list(clients)
    return [
        c
        for c in clients
        if _contains(c.name, q)
        or _contains(c.email, q)
        or (isinstance(c.phone, str) and raw in c.phone)
    ]


def filter_services(
    services: Iterable[Service],
    query: Optional[str] = None,
    category: Optional[str] = None,
) -> List[Service]:
    """Match on name or description, optionally restricted to one category."""
    q = _normalize_query(query)
    return [
        s
        for s in services
        if (not q or _contains(s.name, q) or _contains(s.description, q))
        and (not category or s.category == category)
    ]


def search_employees(
    employees: Iterable[Employee], query: Optional[str]
) -> List[Employee]:
    q = _normalize_query(query)
    if not q:
        return list(employees)
    return [e for e in employees if _contains(e.name, q) or _contains(e.position, q)]


def filter_appointments(
    appointments: Iterable[Appointment], status: Optional[str] = ALL_STATUSES
) -> List[Appointment]:
    if not status or status == ALL_STATUSES:
        return list(appointments)
    return [a for a in appointments if a.status == status]
