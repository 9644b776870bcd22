"""
Unit tests for dashboard statistics.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from salon.db.record_store import InMemoryRecordStore
from salon.domain.entities import Appointment, Client, Employee
from salon.services.data_store import DataStore
from salon.services.stats_service import (
    employee_performance,
    get_dashboard_stats,
    get_inactive_clients,
    get_upcoming_appointments,
)
from tests.config.fixtures import FROZEN_NOW, FrozenClock

TODAY = FROZEN_NOW.date()  # Friday 2023-04-28


@pytest.fixture
def empty_store():
    record_store = InMemoryRecordStore()
    for name in ("clients", "services", "appointments", "transactions", "employees"):
        record_store.save(name, [])
    return DataStore.open(record_store, clock=FrozenClock())


def _book(store, day, amount, status="completed"):
    return store.appointments.add(
        clientId="c1", date=day, totalAmount=amount, status=status
    )


@pytest.mark.unit
@pytest.mark.services
class TestDashboardStats:
    def test_today_counts_completed_only(self, empty_store):
        for amount in (20, 35, 10):
            _book(empty_store, "2023-04-28", amount)
        _book(empty_store, "2023-04-28", 999, status="cancelled")

        stats = get_dashboard_stats(empty_store, TODAY)

        assert stats.revenue_today == 65
        assert stats.appointments_today == 3

    def test_scheduled_appointments_are_excluded(self, empty_store):
        _book(empty_store, "2023-04-28", 50, status="scheduled")
        assert get_dashboard_stats(empty_store, TODAY).revenue_today == 0

    def test_week_is_sunday_to_saturday(self, empty_store):
        _book(empty_store, "2023-04-22", 1)  # previous Saturday
        _book(empty_store, "2023-04-23", 10)  # Sunday
        _book(empty_store, "2023-04-29", 20)  # Saturday
        _book(empty_store, "2023-04-30", 100)  # next Sunday

        stats = get_dashboard_stats(empty_store, TODAY)

        assert stats.appointments_this_week == 2
        assert stats.revenue_this_week == 30

    def test_month_uses_date_prefix(self, empty_store):
        _book(empty_store, "2023-04-01", 10)
        _book(empty_store, "2023-04-30", 20)
        _book(empty_store, "2023-05-01", 40)
        _book(empty_store, "2022-04-15", 80)

        stats = get_dashboard_stats(empty_store, TODAY)

        assert stats.appointments_this_month == 2
        assert stats.revenue_this_month == 30

    def test_total_clients_is_unconditional(self, empty_store):
        empty_store.clients.add(name="Ana")
        empty_store.clients.add(name="Luisa")
        assert get_dashboard_stats(empty_store, TODAY).total_clients == 2

    def test_defaults_to_store_clock(self, store):
        # Seed: completed appointments in April 2023 totalling 335
        stats = get_dashboard_stats(store)
        assert stats.appointments_this_month == 5
        assert stats.revenue_this_month == 335
        assert stats.to_dict()["revenueThisMonth"] == 335

    def test_malformed_dates_are_never_counted(self, empty_store):
        _book(empty_store, "someday", 10)
        stats = get_dashboard_stats(empty_store, TODAY)
        assert (stats.appointments_today, stats.appointments_this_week, stats.appointments_this_month) == (0, 0, 0)

    @pytest.mark.parametrize("bad_amount", ["abc", None, True, [10]])
    def test_malformed_amounts_count_as_zero_revenue(self, empty_store, bad_amount):
        _book(empty_store, "2023-04-28", bad_amount)
        _book(empty_store, "2023-04-28", 15)

        stats = get_dashboard_stats(empty_store, TODAY)

        assert stats.appointments_today == 2
        assert stats.revenue_today == 15
        assert stats.revenue_this_month == 15


@pytest.mark.unit
@pytest.mark.clients
class TestInactiveClients:
    def test_never_seen_and_stale_clients_qualify(self):
        clients = [
            Client(id="1", name="Recent", last_visit="2023-04-20"),
            Client(id="2", name="Never", last_visit=None),
            Client(id="3", name="Stale", last_visit="2023-03-01"),
        ]

        inactive = get_inactive_clients(clients, FROZEN_NOW, days=30, limit=5)

        assert [c.name for c in inactive] == ["Never", "Stale"]

    def test_threshold_boundary(self):
        now = datetime(2023, 4, 28, 15, 0, tzinfo=ZoneInfo("UTC"))
        clients = [
            Client(id="1", name="Thirty days", last_visit="2023-03-29"),
            Client(id="2", name="Thirty-one days", last_visit="2023-03-28"),
        ]

        # Midnight of 2023-03-29 is earlier than 2023-03-29 15:00
        inactive = get_inactive_clients(clients, now, days=30, limit=5)

        assert [c.name for c in inactive] == ["Thirty days", "Thirty-one days"]

    def test_truncates_preserving_order(self):
        clients = [Client(id=str(i), name=f"C{i}") for i in range(8)]
        inactive = get_inactive_clients(clients, FROZEN_NOW, days=30, limit=5)
        assert [c.id for c in inactive] == ["0", "1", "2", "3", "4"]

    def test_defaults_come_from_config(self, monkeypatch):
        monkeypatch.setenv("INACTIVE_CLIENT_DAYS", "5")
        monkeypatch.setenv("DASHBOARD_LIST_LIMIT", "1")
        clients = [
            Client(id="1", last_visit="2023-04-20"),
            Client(id="2", last_visit="2023-04-01"),
        ]
        assert [c.id for c in get_inactive_clients(clients, FROZEN_NOW)] == ["1"]


@pytest.mark.unit
@pytest.mark.appointment
class TestUpcomingAppointments:
    def test_scheduled_from_today_sorted(self):
        appointments = [
            Appointment(id="1", date="2023-04-30", start_time="09:00"),
            Appointment(id="2", date="2023-04-28", start_time="16:00"),
            Appointment(id="3", date="2023-04-28", start_time="10:00"),
            Appointment(id="4", date="2023-04-27", start_time="10:00"),
            Appointment(id="5", date="2023-04-29", status="completed"),
        ]

        upcoming = get_upcoming_appointments(appointments, date(2023, 4, 28), limit=5)

        assert [a.id for a in upcoming] == ["3", "2", "1"]

    def test_limit(self):
        appointments = [Appointment(id=str(i), date="2023-05-01") for i in range(7)]
        assert len(get_upcoming_appointments(appointments, TODAY, limit=5)) == 5


@pytest.mark.unit
class TestEmployeePerformance:
    def test_counts_completed_linked_appointments(self, store):
        performance = employee_performance(
            store.employees.get_by_id("1"), store.appointments.list()
        )

        # Linked 1, 4 (completed) and 6 (scheduled)
        assert performance.completed_appointments == 2
        assert performance.earnings == 115

    def test_dangling_links_are_ignored(self):
        employee = Employee(id="e", appointment_ids=["gone"])
        performance = employee_performance(employee, [])
        assert (performance.completed_appointments, performance.earnings) == (0, 0)

    def test_malformed_links_and_amounts(self):
        appointments = [
            Appointment(id="a1", status="completed", total_amount="abc"),
            Appointment(id="a2", status="completed", total_amount=40),
        ]

        unlinked = employee_performance(Employee(id="e", appointment_ids=None), appointments)
        linked = employee_performance(
            Employee(id="e", appointment_ids=["a1", {"id": "a2"}, "a2"]), appointments
        )

        assert (unlinked.completed_appointments, unlinked.earnings) == (0, 0)
        assert (linked.completed_appointments, linked.earnings) == (2, 40)
