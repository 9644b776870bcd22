"""
Cross-entity consistency rules.

Side effects that must fire when one entity changes another's derived state.
Rules run synchronously inside the operation that triggers them and use the
same repository paths as any manual edit.
"""

import logging

from salon.domain.entities import Appointment
from salon.repositories.client_repo import ClientRepository

logger = logging.getLogger(__name__)


def apply_booking_side_effect(
    clients: ClientRepository, appointment: Appointment
) -> None:
    """Record the booked date as the client's last visit.

    Unconditional: an earlier date still overwrites a later ``last_visit``.
    A dangling client reference makes this a no-op.
    """
    if clients.get_by_id(appointment.client_id) is None:
        logger.info(
            "Booking for unknown client; last visit not recorded",
            extra={
                "context": {
                    "appointment_id": appointment.id,
                    "client_id": appointment.client_id,
                }
            },
        )
        return

    clients.record_visit(appointment.client_id, appointment.date)
