"""
Financial reporting over navigable periods.

A period is a day, a Sunday..Saturday week or a calendar month anchored to a
pivot date; it can be stepped backward and forward. Only completed
appointments count. Service popularity prices every reference at the
service's *current* price, so changing a price changes historical figures.
"""

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from salon.domain.entities import Appointment, Service
from salon.schemas.dtos import DailyRevenue, PeriodReport, ServicePopularity
from salon.utils.date_utils import (
    add_months,
    days_of_month,
    month_prefix,
    parse_date,
    week_bounds,
)
from salon.utils.references import (
    UNKNOWN_SERVICE,
    client_name,
    index_by_id,
    service_names,
)
from salon.utils.values import as_amount, as_id_list

logger = logging.getLogger(__name__)

CSV_HEADER = ["Date", "Client", "Services", "Total"]
TOTAL_LABEL = "TOTAL"


class PeriodKind:
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    ALL = (DAILY, WEEKLY, MONTHLY)


@dataclass(frozen=True)
class ReportPeriod:
    """Reporting window anchored to a pivot date."""

    kind: str
    pivot: date

    def __post_init__(self):
        if self.kind not in PeriodKind.ALL:
            raise ValueError(
                f"Invalid period '{self.kind}'. Expected one of {', '.join(PeriodKind.ALL)}"
            )

    @property
    def bounds(self) -> Tuple[date, date]:
        if self.kind == PeriodKind.DAILY:
            return self.pivot, self.pivot
        if self.kind == PeriodKind.WEEKLY:
            return week_bounds(self.pivot)
        days = days_of_month(self.pivot)
        return days[0], days[-1]

    def contains(self, date_str: str) -> bool:
        """Whether an appointment date string falls inside the period."""
        if not isinstance(date_str, str):
            return False
        if self.kind == PeriodKind.DAILY:
            return date_str == self.pivot.isoformat()
        if self.kind == PeriodKind.MONTHLY:
            return date_str.startswith(month_prefix(self.pivot))
        day = parse_date(date_str)
        start, end = self.bounds
        return day is not None and start <= day <= end

    def step(self, count: int) -> "ReportPeriod":
        if self.kind == PeriodKind.DAILY:
            pivot = self.pivot + timedelta(days=count)
        elif self.kind == PeriodKind.WEEKLY:
            pivot = self.pivot + timedelta(days=7 * count)
        else:
            pivot = add_months(self.pivot, count)
        return ReportPeriod(self.kind, pivot)

    def previous(self) -> "ReportPeriod":
        return self.step(-1)

    def next(self) -> "ReportPeriod":
        return self.step(1)

    def label(self) -> str:
        if self.kind == PeriodKind.DAILY:
            return self.pivot.strftime("%d %B %Y")
        if self.kind == PeriodKind.WEEKLY:
            start, end = self.bounds
            return f"{start.strftime('%d')} - {end.strftime('%d %B %Y')}"
        return self.pivot.strftime("%B %Y")


def parse_period(kind: Optional[str], pivot: Optional[str], today: date) -> ReportPeriod:
    """Build a period from raw consumer input (query string, CLI option).

    Raises:
        ValueError: If the kind is unknown or the pivot is not ``YYYY-MM-DD``.
    """
    pivot_date = today
    if pivot:
        pivot_date = parse_date(pivot)
        if pivot_date is None:
            raise ValueError(f"Invalid date '{pivot}'. Expected YYYY-MM-DD")
    return ReportPeriod(kind or PeriodKind.DAILY, pivot_date)


def period_appointments(
    appointments: Iterable[Appointment], period: ReportPeriod
) -> List[Appointment]:
    """Completed appointments inside the period, in stored order."""
    return [a for a in appointments if a.is_completed and period.contains(a.date)]


def service_popularity(
    appointments: Iterable[Appointment], services: Iterable[Service]
) -> List[ServicePopularity]:
    """Reference counts per service, most popular first.

    Revenue is count times the service's current price; dangling service ids
    keep their count but earn nothing.
    """
    counts: Dict[str, int] = {}
    for appointment in appointments:
        for service_id in as_id_list(appointment.service_ids):
            counts[service_id] = counts.get(service_id, 0) + 1

    services_by_id = index_by_id(services)
    popularity = []
    for service_id, count in counts.items():
        service = services_by_id.get(service_id)
        popularity.append(
            ServicePopularity(
                service_id=service_id,
                name=service.name if service is not None else UNKNOWN_SERVICE,
                count=count,
                revenue=as_amount(service.price) * count if service is not None else 0,
            )
        )
    # sort is stable: ties keep first-seen order
    popularity.sort(key=lambda entry: entry.count, reverse=True)
    return popularity


def build_period_report(store, period: ReportPeriod) -> PeriodReport:
    appointments = period_appointments(store.appointments.list(), period)
    start, end = period.bounds
    return PeriodReport(
        kind=period.kind,
        pivot=period.pivot.isoformat(),
        start=start.isoformat(),
        end=end.isoformat(),
        label=period.label(),
        appointments=appointments,
        total_revenue=sum(as_amount(a.total_amount) for a in appointments),
        popularity=service_popularity(appointments, store.services.list()),
    )


def daily_revenue_series(
    appointments: Iterable[Appointment], pivot: date
) -> List[DailyRevenue]:
    """Completed revenue for every day of the pivot's month."""
    completed = [a for a in appointments if a.is_completed]
    series = []
    for day in days_of_month(pivot):
        day_str = day.isoformat()
        series.append(
            DailyRevenue(
                date=day_str,
                revenue=sum(
                    as_amount(a.total_amount) for a in completed if a.date == day_str
                ),
            )
        )
    return series


def export_filename(period: ReportPeriod) -> str:
    return f"financial-report-{period.pivot.isoformat()}.csv"


def _format_amount(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def export_period_csv(store, period: ReportPeriod) -> str:
    """CSV text: header, one row per completed appointment, TOTAL row."""
    report = build_period_report(store, period)
    clients_by_id = index_by_id(store.clients.list())
    services_by_id = index_by_id(store.services.list())

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for appointment in report.appointments:
        writer.writerow(
            [
                appointment.date,
                client_name(clients_by_id, appointment.client_id),
                ", ".join(
                    str(name)
                    for name in service_names(
                        services_by_id, as_id_list(appointment.service_ids)
                    )
                ),
                _format_amount(as_amount(appointment.total_amount)),
            ]
        )
    writer.writerow(["", "", TOTAL_LABEL, _format_amount(report.total_revenue)])

    logger.info(
        "Financial report exported",
        extra={
            "context": {
                "period": period.kind,
                "pivot": period.pivot.isoformat(),
                "rows": len(report.appointments),
            }
        },
    )
    return buffer.getvalue()
