"""
Unit tests for date helpers and reference resolution.
"""

from datetime import date

import pytest

from salon.domain.entities import Client, Employee, Service
from salon.utils.date_utils import (
    add_months,
    format_hhmm,
    parse_date,
    parse_hhmm,
    week_bounds,
)
from salon.utils.references import (
    UNKNOWN_CLIENT,
    UNKNOWN_EMPLOYEE,
    client_name,
    employee_name,
    index_by_id,
    service_names,
)
from salon.utils.values import as_amount, as_id_list


@pytest.mark.unit
class TestDateUtils:
    def test_week_bounds_start_on_sunday(self):
        assert week_bounds(date(2023, 4, 23)) == (date(2023, 4, 23), date(2023, 4, 29))
        assert week_bounds(date(2023, 4, 29)) == (date(2023, 4, 23), date(2023, 4, 29))

    def test_add_months_clamps_day(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 12, 15), 1) == date(2024, 1, 15)
        assert add_months(date(2023, 1, 15), -1) == date(2022, 12, 15)

    def test_parse_date(self):
        assert parse_date("2023-04-28") == date(2023, 4, 28)
        assert parse_date("") is None
        assert parse_date("28/04/2023") is None
        assert parse_date(None) is None

    @pytest.mark.parametrize("value", ["", "10", "24:00", "10:60", "ab:cd"])
    def test_parse_hhmm_rejects(self, value):
        with pytest.raises(ValueError):
            parse_hhmm(value)

    def test_hhmm_conversion(self):
        assert parse_hhmm("09:05") == 545
        assert format_hhmm(545) == "09:05"


@pytest.mark.unit
class TestReferences:
    def test_resolved_and_dangling_references(self):
        clients = index_by_id([Client(id="1", name="Ana")])
        services = index_by_id([Service(id="s", name="Gel")])
        employees = index_by_id([Employee(id="e", name="Gabriela")])

        assert client_name(clients, "1") == "Ana"
        assert client_name(clients, "2") == UNKNOWN_CLIENT
        assert service_names(services, ["s", "gone"]) == ["Gel", "Unknown service"]
        assert employee_name(employees, "e") == "Gabriela"
        assert employee_name(employees, "x") == UNKNOWN_EMPLOYEE

    def test_unhashable_reference_dangles(self):
        clients = index_by_id([Client(id="1", name="Ana")])
        assert client_name(clients, {"id": "1"}) == UNKNOWN_CLIENT
        assert client_name(clients, ["1"]) == UNKNOWN_CLIENT


@pytest.mark.unit
class TestStoredValues:
    @pytest.mark.parametrize(
        "value, expected",
        [(35, 35), (12.5, 12.5), (0, 0), ("35", 0), (None, 0), (True, 0), ([1], 0)],
    )
    def test_as_amount(self, value, expected):
        assert as_amount(value) == expected

    def test_as_id_list(self):
        assert as_id_list(["a", "b"]) == ["a", "b"]
        assert as_id_list(("a",)) == ["a"]
        assert as_id_list(["a", ["b"], {"c": 1}, "d"]) == ["a", "d"]
        assert as_id_list(None) == []
        assert as_id_list("ab") == []
        assert as_id_list({"a": 1}) == []
