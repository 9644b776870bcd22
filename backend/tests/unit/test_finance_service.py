"""
Unit tests for financial reporting: periods, popularity, series and export.
"""

import csv
import io
from datetime import date

import pytest

from salon.db.record_store import InMemoryRecordStore
from salon.services.data_store import DataStore
from salon.services.finance_service import (
    PeriodKind,
    ReportPeriod,
    build_period_report,
    daily_revenue_series,
    export_filename,
    export_period_csv,
    parse_period,
    service_popularity,
)
from salon.utils.references import UNKNOWN_CLIENT, UNKNOWN_SERVICE
from tests.config.fixtures import FrozenClock


@pytest.fixture
def finance_store():
    record_store = InMemoryRecordStore()
    record_store.save(
        "services",
        [
            {"id": "x", "name": "Francesa", "duration": 45, "price": 30, "category": "Clásicos"},
            {"id": "y", "name": "Gel, premium", "duration": 45, "price": 35, "category": "Premium"},
        ],
    )
    record_store.save("clients", [{"id": "c1", "name": "Ana Martínez"}])
    record_store.save("appointments", [])
    record_store.save("employees", [])
    record_store.save("transactions", [])
    return DataStore.open(record_store, clock=FrozenClock())


def _completed(store, day, service_ids, amount, client_id="c1"):
    return store.appointments.add(
        clientId=client_id,
        date=day,
        serviceIds=service_ids,
        totalAmount=amount,
        status="completed",
    )


@pytest.mark.unit
@pytest.mark.finance
class TestReportPeriod:
    def test_rejects_unknown_kind(self):
        with pytest.raises(ValueError):
            ReportPeriod("yearly", date(2023, 4, 28))

    def test_bounds(self):
        pivot = date(2023, 4, 28)
        assert ReportPeriod(PeriodKind.DAILY, pivot).bounds == (pivot, pivot)
        assert ReportPeriod(PeriodKind.WEEKLY, pivot).bounds == (
            date(2023, 4, 23),
            date(2023, 4, 29),
        )
        assert ReportPeriod(PeriodKind.MONTHLY, pivot).bounds == (
            date(2023, 4, 1),
            date(2023, 4, 30),
        )

    def test_navigation(self):
        daily = ReportPeriod(PeriodKind.DAILY, date(2023, 3, 1))
        assert daily.previous().pivot == date(2023, 2, 28)
        assert daily.next().pivot == date(2023, 3, 2)

        weekly = ReportPeriod(PeriodKind.WEEKLY, date(2023, 4, 28))
        assert weekly.previous().pivot == date(2023, 4, 21)
        assert weekly.next().bounds[0] == date(2023, 4, 30)

        monthly = ReportPeriod(PeriodKind.MONTHLY, date(2023, 1, 31))
        assert monthly.next().pivot == date(2023, 2, 28)
        assert monthly.previous().pivot == date(2022, 12, 31)

    def test_contains(self):
        weekly = ReportPeriod(PeriodKind.WEEKLY, date(2023, 4, 28))
        assert weekly.contains("2023-04-23")
        assert not weekly.contains("2023-04-30")
        assert not weekly.contains("garbage")

        monthly = ReportPeriod(PeriodKind.MONTHLY, date(2023, 4, 28))
        assert monthly.contains("2023-04-01")
        assert not monthly.contains("2023-05-01")

    def test_labels(self):
        pivot = date(2023, 4, 28)
        assert ReportPeriod(PeriodKind.DAILY, pivot).label() == "28 April 2023"
        assert ReportPeriod(PeriodKind.WEEKLY, pivot).label() == "23 - 29 April 2023"
        assert ReportPeriod(PeriodKind.MONTHLY, pivot).label() == "April 2023"

    def test_parse_period(self):
        today = date(2023, 4, 28)
        assert parse_period(None, None, today) == ReportPeriod(PeriodKind.DAILY, today)
        assert parse_period("monthly", "2023-02-10", today).pivot == date(2023, 2, 10)
        with pytest.raises(ValueError):
            parse_period("daily", "10/02/2023", today)
        with pytest.raises(ValueError):
            parse_period("hourly", None, today)


@pytest.mark.unit
@pytest.mark.finance
class TestServicePopularity:
    def test_counts_and_current_price_revenue(self, finance_store):
        _completed(finance_store, "2023-04-10", ["x"], 30)
        _completed(finance_store, "2023-04-12", ["x", "x"], 60)
        period = ReportPeriod(PeriodKind.MONTHLY, date(2023, 4, 28))

        popularity = build_period_report(finance_store, period).popularity
        assert (popularity[0].service_id, popularity[0].count, popularity[0].revenue) == ("x", 3, 90)

        finance_store.services.update("x", price=40)

        popularity = build_period_report(finance_store, period).popularity
        assert popularity[0].revenue == 120

    def test_sorted_by_descending_count(self, finance_store):
        _completed(finance_store, "2023-04-10", ["y"], 35)
        _completed(finance_store, "2023-04-11", ["x"], 30)
        _completed(finance_store, "2023-04-12", ["x"], 30)

        popularity = service_popularity(
            finance_store.appointments.list(), finance_store.services.list()
        )

        assert [p.service_id for p in popularity] == ["x", "y"]

    def test_dangling_service_gets_placeholder(self, finance_store):
        popularity = service_popularity(
            [_completed(finance_store, "2023-04-10", ["deleted"], 10)],
            finance_store.services.list(),
        )
        assert (popularity[0].name, popularity[0].count, popularity[0].revenue) == (
            UNKNOWN_SERVICE,
            1,
            0,
        )


@pytest.mark.unit
@pytest.mark.finance
class TestPeriodReport:
    def test_only_completed_inside_period(self, finance_store):
        _completed(finance_store, "2023-04-28", ["x"], 30)
        _completed(finance_store, "2023-04-27", ["y"], 35)
        finance_store.appointments.add(
            clientId="c1", date="2023-04-28", totalAmount=500, status="cancelled"
        )

        report = build_period_report(
            finance_store, ReportPeriod(PeriodKind.DAILY, date(2023, 4, 28))
        )

        assert len(report.appointments) == 1
        assert report.total_revenue == 30
        assert report.to_dict()["appointmentCount"] == 1
        assert report.to_dict()["label"] == "28 April 2023"

    def test_daily_revenue_series_covers_month(self, finance_store):
        _completed(finance_store, "2023-02-03", ["x"], 30)
        _completed(finance_store, "2023-02-03", ["y"], 35)

        series = daily_revenue_series(finance_store.appointments.list(), date(2023, 2, 15))

        assert len(series) == 28
        assert series[2].date == "2023-02-03"
        assert series[2].revenue == 65
        assert sum(d.revenue for d in series) == 65

    def test_malformed_stored_values_aggregate_as_zero(self, finance_store):
        _completed(finance_store, "2023-04-28", None, "abc")
        _completed(finance_store, "2023-04-28", "x", 30)
        _completed(finance_store, "2023-04-28", [["x"], "y", "x"], 35)
        finance_store.services.update("x", price="free")
        period = ReportPeriod(PeriodKind.DAILY, date(2023, 4, 28))

        report = build_period_report(finance_store, period)

        assert len(report.appointments) == 3
        assert report.total_revenue == 65
        assert [(p.service_id, p.count, p.revenue) for p in report.popularity] == [
            ("y", 1, 35),
            ("x", 1, 0),
        ]
        series = daily_revenue_series(finance_store.appointments.list(), period.pivot)
        assert series[27].revenue == 65

        rows = list(csv.reader(io.StringIO(export_period_csv(finance_store, period))))
        assert rows[1] == ["2023-04-28", "Ana Martínez", "", "0"]
        assert rows[3] == ["2023-04-28", "Ana Martínez", "Gel, premium, Francesa", "35"]
        assert rows[-1] == ["", "", "TOTAL", "65"]


@pytest.mark.unit
@pytest.mark.finance
class TestCsvExport:
    def test_rows_and_total(self, finance_store):
        _completed(finance_store, "2023-04-28", ["x", "y"], 65)
        _completed(finance_store, "2023-04-28", ["x"], 30, client_id="gone")
        period = ReportPeriod(PeriodKind.DAILY, date(2023, 4, 28))

        rows = list(csv.reader(io.StringIO(export_period_csv(finance_store, period))))

        assert rows[0] == ["Date", "Client", "Services", "Total"]
        assert rows[1] == ["2023-04-28", "Ana Martínez", "Francesa, Gel, premium", "65"]
        assert rows[2] == ["2023-04-28", UNKNOWN_CLIENT, "Francesa", "30"]
        assert rows[-1] == ["", "", "TOTAL", "95"]

    def test_empty_period_still_has_total_row(self, finance_store):
        period = ReportPeriod(PeriodKind.MONTHLY, date(2020, 1, 1))
        text = export_period_csv(finance_store, period)
        assert text == "Date,Client,Services,Total\n,,TOTAL,0\n"

    def test_filename_embeds_pivot_date(self):
        period = ReportPeriod(PeriodKind.WEEKLY, date(2023, 4, 28))
        assert export_filename(period) == "financial-report-2023-04-28.csv"
