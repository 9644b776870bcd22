"""
Domain package - Pure business records layer.

This package contains:
- entities.py: Domain entities and their durable codec
- interfaces.py: Record store and repository contracts
"""

from .entities import (
    Appointment,
    AppointmentStatus,
    Client,
    Employee,
    PaymentMethod,
    PaymentStatus,
    Service,
    Transaction,
)
from .interfaces import IRecordStore, IRepository, IRepositoryReader, IRepositoryWriter

__all__ = [
    # Domain entities
    "Client",
    "Service",
    "Appointment",
    "Employee",
    "Transaction",
    "AppointmentStatus",
    "PaymentMethod",
    "PaymentStatus",
    # Contracts
    "IRecordStore",
    "IRepository",
    "IRepositoryReader",
    "IRepositoryWriter",
]
