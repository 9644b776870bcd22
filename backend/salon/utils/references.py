"""Resolution of cross-collection references for display.

References are never validated on write, so any id may dangle. Every lookup
here has an explicit fallback: a placeholder label instead of an error.
"""

from collections.abc import Hashable
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from salon.domain.entities import Client, Employee, Record, Service

UNKNOWN_CLIENT = "Unknown client"
UNKNOWN_SERVICE = "Unknown service"
UNKNOWN_EMPLOYEE = "Unknown employee"

R = TypeVar("R", bound=Record)


def index_by_id(records: Iterable[R]) -> Dict[str, R]:
    return {record.id: record for record in records}


def resolve(records_by_id: Dict[str, R], record_id: str) -> Optional[R]:
    """Return the referenced record, or None when the reference dangles."""
    if not isinstance(record_id, Hashable):
        return None
    return records_by_id.get(record_id)


def client_name(clients_by_id: Dict[str, Client], client_id: str) -> str:
    client = resolve(clients_by_id, client_id)
    return client.name if client is not None else UNKNOWN_CLIENT


def service_name(services_by_id: Dict[str, Service], service_id: str) -> str:
    service = resolve(services_by_id, service_id)
    return service.name if service is not None else UNKNOWN_SERVICE


def service_names(
    services_by_id: Dict[str, Service], service_ids: Sequence[str]
) -> List[str]:
    """Names in the stored order, placeholders for dangling ids."""
    return [service_name(services_by_id, sid) for sid in service_ids]


def employee_name(employees_by_id: Dict[str, Employee], employee_id: str) -> str:
    employee = resolve(employees_by_id, employee_id)
    return employee.name if employee is not None else UNKNOWN_EMPLOYEE
