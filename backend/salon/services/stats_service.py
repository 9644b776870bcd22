"""
Dashboard statistics.

Everything is recomputed on demand by scanning the collections (pull model,
no caching). Only completed appointments count towards any revenue figure.

Time windows use the stored ``YYYY-MM-DD`` date string of each appointment:
- today: exact match with the current date
- week: Sunday..Saturday week containing today, both ends inclusive
- month: ``YYYY-MM`` prefix of the current month
"""

from datetime import date, datetime, time, timedelta
from typing import Callable, Iterable, List, Optional

from salon.core import config
from salon.domain.entities import Appointment, AppointmentStatus, Client, Employee
from salon.schemas.dtos import DashboardStats, EmployeePerformance, WindowStats
from salon.utils.date_utils import month_prefix, parse_date, week_bounds
from salon.utils.values import as_amount, as_id_list


def is_today(appointment: Appointment, today: date) -> bool:
    return appointment.date == today.isoformat()


def is_this_week(appointment: Appointment, today: date) -> bool:
    appointment_date = parse_date(appointment.date)
    if appointment_date is None:
        return False
    start, end = week_bounds(today)
    return start <= appointment_date <= end


def is_this_month(appointment: Appointment, today: date) -> bool:
    return isinstance(appointment.date, str) and appointment.date.startswith(
        month_prefix(today)
    )


def window_stats(
    appointments: Iterable[Appointment],
    in_window: Callable[[Appointment, date], bool],
    today: date,
) -> WindowStats:
    """Count and revenue of completed appointments inside one window."""
    selected = [a for a in appointments if a.is_completed and in_window(a, today)]
    return WindowStats(
        appointments=len(selected),
        revenue=sum(as_amount(a.total_amount) for a in selected),
    )


def get_dashboard_stats(store, today: Optional[date] = None) -> DashboardStats:
    """Dashboard KPIs: client count plus today/week/month activity."""
    today = today or store.today()
    appointments = store.appointments.list()
    return DashboardStats(
        total_clients=len(store.clients),
        today=window_stats(appointments, is_today, today),
        week=window_stats(appointments, is_this_week, today),
        month=window_stats(appointments, is_this_month, today),
    )


def get_inactive_clients(
    clients: Iterable[Client],
    now: datetime,
    days: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Client]:
    """Clients never seen, or last seen more than ``days`` days before ``now``.

    Keeps roster order and truncates to ``limit`` entries.
    """
    days = config.get_inactive_client_days() if days is None else days
    limit = config.get_dashboard_list_limit() if limit is None else limit
    threshold = now - timedelta(days=days)

    inactive = []
    for client in clients:
        last_visit = parse_date(client.last_visit)
        if last_visit is None or _start_of_day(last_visit, now) < threshold:
            inactive.append(client)
    return inactive[:limit]


def get_upcoming_appointments(
    appointments: Iterable[Appointment], today: date, limit: Optional[int] = None
) -> List[Appointment]:
    """Scheduled appointments from today on, earliest first."""
    limit = config.get_dashboard_list_limit() if limit is None else limit
    today_str = today.isoformat()
    upcoming = [
        a
        for a in appointments
        if a.status == AppointmentStatus.SCHEDULED
        and isinstance(a.date, str)
        and a.date >= today_str
    ]
    upcoming.sort(key=lambda a: (a.date, str(a.start_time)))
    return upcoming[:limit]


def employee_performance(
    employee: Employee, appointments: Iterable[Appointment]
) -> EmployeePerformance:
    """Completed appointments and earnings over the employee's linked ids."""
    linked = set(as_id_list(employee.appointment_ids))
    completed = [a for a in appointments if a.is_completed and a.id in linked]
    return EmployeePerformance(
        employee_id=employee.id,
        completed_appointments=len(completed),
        earnings=sum(as_amount(a.total_amount) for a in completed),
    )


def _start_of_day(day: date, like: datetime) -> datetime:
    """Midnight of ``day`` in the timezone of ``like`` (naive stays naive)."""
    return datetime.combine(day, time.min, tzinfo=like.tzinfo)
