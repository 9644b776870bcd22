"""
Bundled default data for each collection.

Used whenever a collection has no durable copy yet, or its durable copy is
corrupted. Records use exactly the durable representation so seeded and
store-created records are indistinguishable.
"""

import copy
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

SEED_CLIENTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Ana Martínez",
        "phone": "555-123-4567",
        "email": "ana.martinez@example.com",
        "preferredServices": ["2", "3"],
        "notes": "Prefiere tonos pastel",
        "createdAt": "2023-01-15",
        "lastVisit": "2023-04-20",
    },
    {
        "id": "2",
        "name": "Sofía Rodríguez",
        "phone": "555-234-5678",
        "email": "sofia.rodriguez@example.com",
        "preferredServices": ["1", "4"],
        "notes": "Alérgica a ciertos químicos, verificar antes",
        "createdAt": "2023-02-10",
        "lastVisit": "2023-04-15",
    },
    {
        "id": "3",
        "name": "Luisa Fernández",
        "phone": "555-345-6789",
        "email": "luisa.fernandez@example.com",
        "preferredServices": ["5", "6"],
        "notes": "Cliente frecuente, le gusta el diseño de flores",
        "createdAt": "2023-01-05",
        "lastVisit": "2023-04-10",
    },
    {
        "id": "4",
        "name": "Carmen Gómez",
        "phone": "555-456-7890",
        "email": "carmen.gomez@example.com",
        "preferredServices": ["2", "7"],
        "notes": "Prefiere manicura rápida, suele tener prisa",
        "createdAt": "2023-03-20",
        "lastVisit": "2023-04-22",
    },
    {
        "id": "5",
        "name": "María López",
        "phone": "555-567-8901",
        "email": "maria.lopez@example.com",
        "preferredServices": ["3", "8"],
        "notes": "Le gusta conversación mínima durante el servicio",
        "createdAt": "2023-02-25",
        "lastVisit": "2023-04-18",
    },
]

SEED_SERVICES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Manicura Básica",
        "description": "Limado, cutícula y esmalte tradicional",
        "duration": 30,
        "price": 20,
        "category": "Básicos",
    },
    {
        "id": "2",
        "name": "Manicura de Gel",
        "description": "Manicura completa con aplicación de gel de larga duración",
        "duration": 45,
        "price": 35,
        "category": "Premium",
    },
    {
        "id": "3",
        "name": "Manicura Francesa",
        "description": "Manicura clásica con punta blanca y base rosa",
        "duration": 45,
        "price": 30,
        "category": "Clásicos",
    },
    {
        "id": "4",
        "name": "Manicura con Diseño",
        "description": "Incluye arte en uñas con diseños personalizados",
        "duration": 60,
        "price": 45,
        "category": "Artísticos",
    },
    {
        "id": "5",
        "name": "Pedicura Completa",
        "description": "Tratamiento completo para pies con exfoliación",
        "duration": 60,
        "price": 40,
        "category": "Pedicura",
    },
    {
        "id": "6",
        "name": "Uñas Acrílicas",
        "description": "Aplicación de uñas acrílicas con el diseño de tu elección",
        "duration": 90,
        "price": 60,
        "category": "Premium",
    },
    {
        "id": "7",
        "name": "Reparación de Uñas",
        "description": "Arreglo de uñas dañadas o rotas",
        "duration": 20,
        "price": 15,
        "category": "Básicos",
    },
    {
        "id": "8",
        "name": "Tratamiento de Parafina",
        "description": "Hidratación profunda con baño de parafina",
        "duration": 30,
        "price": 25,
        "category": "Tratamientos",
    },
]

SEED_APPOINTMENTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "clientId": "1",
        "date": "2023-04-20",
        "startTime": "10:00",
        "endTime": "11:00",
        "serviceIds": ["2", "3"],
        "status": "completed",
        "totalAmount": 65,
        "notes": "Cliente satisfecha con el servicio",
    },
    {
        "id": "2",
        "clientId": "2",
        "date": "2023-04-15",
        "startTime": "14:00",
        "endTime": "15:30",
        "serviceIds": ["1", "4"],
        "status": "completed",
        "totalAmount": 65,
        "notes": "Solicitó diseños de flores pequeñas",
    },
    {
        "id": "3",
        "clientId": "3",
        "date": "2023-04-10",
        "startTime": "11:00",
        "endTime": "13:00",
        "serviceIds": ["5", "6"],
        "status": "completed",
        "totalAmount": 100,
        "notes": "Trajo sus propias referencias de diseño",
    },
    {
        "id": "4",
        "clientId": "4",
        "date": "2023-04-22",
        "startTime": "16:00",
        "endTime": "16:45",
        "serviceIds": ["2", "7"],
        "status": "completed",
        "totalAmount": 50,
        "notes": "Llegó 10 minutos tarde",
    },
    {
        "id": "5",
        "clientId": "5",
        "date": "2023-04-18",
        "startTime": "13:00",
        "endTime": "14:30",
        "serviceIds": ["3", "8"],
        "status": "completed",
        "totalAmount": 55,
        "notes": "Muy satisfecha con el tratamiento de parafina",
    },
    {
        "id": "6",
        "clientId": "1",
        "date": "2023-04-28",
        "startTime": "15:00",
        "endTime": "16:00",
        "serviceIds": ["2"],
        "status": "scheduled",
        "totalAmount": 35,
        "notes": "Cita de seguimiento",
    },
]

SEED_EMPLOYEES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Gabriela Torres",
        "position": "Manicurista Senior",
        "appointmentIds": ["1", "4", "6"],
    },
    {
        "id": "2",
        "name": "Valentina Ruiz",
        "position": "Especialista en Uñas Acrílicas",
        "appointmentIds": ["3"],
    },
    {
        "id": "3",
        "name": "Isabella Morales",
        "position": "Manicurista y Pedicurista",
        "appointmentIds": ["2", "5"],
    },
]

SEED_DATA: Dict[str, List[Dict[str, Any]]] = {
    "clients": SEED_CLIENTS,
    "services": SEED_SERVICES,
    "appointments": SEED_APPOINTMENTS,
    "transactions": [],
    "employees": SEED_EMPLOYEES,
}


def seed_records(collection: str) -> List[Dict[str, Any]]:
    """Return a fresh copy of the default records for a collection.

    Collections without bundled data start empty.
    """
    records = SEED_DATA.get(collection)
    if records is None:
        logger.warning(
            "No seed data for collection; starting empty",
            extra={"context": {"collection": collection}},
        )
        return []
    return copy.deepcopy(records)
