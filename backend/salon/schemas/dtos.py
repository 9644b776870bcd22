"""
Data Transfer Objects (DTOs) for derived, never-stored results.

Each DTO serializes with the same camelCase convention as the entities.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from salon.domain.entities import Appointment


@dataclass
class ScheduleQuote:
    """Outputs of the scheduling calculator."""

    total_duration: int
    total_amount: float
    end_time: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalDuration": self.total_duration,
            "totalAmount": self.total_amount,
            "endTime": self.end_time,
        }


@dataclass
class WindowStats:
    """Completed-appointment count and revenue inside one time window."""

    appointments: int = 0
    revenue: float = 0


@dataclass
class DashboardStats:
    total_clients: int
    today: WindowStats
    week: WindowStats
    month: WindowStats

    @property
    def appointments_today(self) -> int:
        return self.today.appointments

    @property
    def revenue_today(self) -> float:
        return self.today.revenue

    @property
    def appointments_this_week(self) -> int:
        return self.week.appointments

    @property
    def revenue_this_week(self) -> float:
        return self.week.revenue

    @property
    def appointments_this_month(self) -> int:
        return self.month.appointments

    @property
    def revenue_this_month(self) -> float:
        return self.month.revenue

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalClients": self.total_clients,
            "appointmentsToday": self.appointments_today,
            "revenueToday": self.revenue_today,
            "appointmentsThisWeek": self.appointments_this_week,
            "revenueThisWeek": self.revenue_this_week,
            "appointmentsThisMonth": self.appointments_this_month,
            "revenueThisMonth": self.revenue_this_month,
        }


@dataclass
class ServicePopularity:
    service_id: str
    name: str
    count: int
    revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "serviceId": self.service_id,
            "name": self.name,
            "count": self.count,
            "revenue": self.revenue,
        }


@dataclass
class DailyRevenue:
    date: str
    revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "revenue": self.revenue}


@dataclass
class PeriodReport:
    """Financial report for one reporting period."""

    kind: str
    pivot: str
    start: str
    end: str
    label: str
    appointments: List[Appointment] = field(default_factory=list)
    total_revenue: float = 0
    popularity: List[ServicePopularity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.kind,
            "pivot": self.pivot,
            "start": self.start,
            "end": self.end,
            "label": self.label,
            "appointments": [a.to_dict() for a in self.appointments],
            "appointmentCount": len(self.appointments),
            "totalRevenue": self.total_revenue,
            "servicePopularity": [p.to_dict() for p in self.popularity],
        }


@dataclass
class EmployeePerformance:
    employee_id: str
    completed_appointments: int
    earnings: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "completedAppointments": self.completed_appointments,
            "earnings": self.earnings,
        }
