from __future__ import annotations

from datetime import date

import pytest

from src.pharmacy_payroll.pharmacy_payroll.attendance.model import AttendanceRecord
from src.pharmacy_payroll.pharmacy_payroll.container import build_services
from src.pharmacy_payroll.pharmacy_payroll.core.enums import AttendanceStatus
from src.pharmacy_payroll.pharmacy_payroll.employees.model import Employee
from src.pharmacy_payroll.pharmacy_payroll.main import create_app
from src.pharmacy_payroll.pharmacy_payroll.payroll.model import PayParameters


class InMemoryEmployees:
    def __init__(self, employees):
        self._employees = employees

    def list_active(self):
        return list(self._employees)


class InMemoryParameters:
    def __init__(self, params):
        self.params = params

    def get_current(self):
        return self.params

    def update_exchange_rate(self, rate):
        self.params = PayParameters(rate, self.params.meal_voucher_foreign, self.params.minimum_wage)


class InMemoryAttendance:
    def __init__(self, rows):
        self._rows = rows

    def list_for_employee(self, employee_id, *, start_date, end_date):
        return [
            r
            for r in self._rows
            if r.employee_id == employee_id and start_date <= date.fromisoformat(r.work_date) <= end_date
        ]


class StubRateClient:
    def fetch_rate(self, fallback=None):
        return 55.0


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    employee = Employee("E-1", "Ana", "Pérez", 500.0, 130.0, date(2020, 1, 10))
    rows = [
        AttendanceRecord("E-1", "2025-01-07", AttendanceStatus.PRESENT, "14:00", "23:00"),
        AttendanceRecord("E-1", "2025-01-20", AttendanceStatus.PRESENT, "08:00", "16:00"),
        AttendanceRecord("E-1", "2025-01-21", AttendanceStatus.ABSENT),
    ]
    container = build_services(
        employees_repo=InMemoryEmployees([employee]),
        attendance_repo=InMemoryAttendance(rows),
        parameters_repo=InMemoryParameters(PayParameters(40.0, 40.0, 130.0)),
        rate_client=StubRateClient(),
    )
    app = create_app(container)
    return app.test_client()


def test_payroll_preview(client):
    resp = client.get("/api/payroll/preview?year=2025&month=1&half=1")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["period"]["start"] == "2025-01-01"
    assert body["period"]["end"] == "2025-01-15"
    assert body["lines"][0]["hours"]["days_worked"] == 1
    assert body["lines"][0]["pay"]["period_pay"] == pytest.approx(10000)
    assert body["lines"][0]["pay"]["meal_voucher_allowance"] == 0


def test_payroll_preview_rejects_bad_half(client):
    resp = client.get("/api/payroll/preview?year=2025&month=1&half=3")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_attendance_summary(client):
    resp = client.get("/api/attendance/E-1/summary?start=2025-01-16&end=2025-01-31")

    assert resp.status_code == 200
    summary = resp.get_json()["summary"]
    assert summary["days_worked"] == 1
    assert summary["absences"] == 1
    assert summary["normal_hours"] == pytest.approx(8)


def test_refresh_exchange_rate(client):
    resp = client.post("/api/payroll/exchange-rate/refresh")

    assert resp.get_json() == {"success": True, "exchange_rate": 55.0}


def test_export_returns_spreadsheet(client):
    resp = client.get("/api/payroll/export?year=2025&month=1&half=2")

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "nomina_2025_01_q2.xlsx" in resp.headers["Content-Disposition"]


@pytest.mark.parametrize("query", ["start=2025-13-01&end=2025-01-31", "start=2025-01-01&end=yesterday"])
def test_attendance_summary_rejects_bad_dates(client, query):
    resp = client.get(f"/api/attendance/E-1/summary?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize("query", ["year=0&month=1&half=1", "year=10000&month=1&half=1", "year=2025&month=13&half=1"])
def test_payroll_preview_rejects_out_of_range_period(client, query):
    resp = client.get(f"/api/payroll/preview?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
