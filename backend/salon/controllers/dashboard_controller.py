"""
Dashboard endpoint: KPIs plus the short lists shown beside them.
"""

from flask import Blueprint

from salon.core import config
from salon.core.api_utils import api_response, get_store
from salon.services.stats_service import (
    employee_performance,
    get_dashboard_stats,
    get_inactive_clients,
    get_upcoming_appointments,
)
from salon.utils.references import client_name, index_by_id

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


@dashboard_bp.route("", methods=["GET"])
def dashboard():
    store = get_store()
    now = store.now()
    limit = config.get_dashboard_list_limit()
    clients_by_id = index_by_id(store.clients.list())
    appointments = store.appointments.list()

    upcoming = []
    for appointment in get_upcoming_appointments(appointments, now.date(), limit):
        entry = appointment.to_dict()
        entry["clientName"] = client_name(clients_by_id, appointment.client_id)
        upcoming.append(entry)

    data = {
        "stats": get_dashboard_stats(store, now.date()).to_dict(),
        "inactiveClients": [
            c.to_dict()
            for c in get_inactive_clients(
                store.clients.list(), now, config.get_inactive_client_days(), limit
            )
        ],
        "upcomingAppointments": upcoming,
        "employeePerformance": [
            {"name": employee.name, **employee_performance(employee, appointments).to_dict()}
            for employee in store.employees.list()
        ],
    }
    return api_response(True, "Dashboard loaded", data)
