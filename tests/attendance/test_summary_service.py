from __future__ import annotations

from datetime import date

import pytest

from src.pharmacy_payroll.pharmacy_payroll.attendance.model import AttendanceRecord
from src.pharmacy_payroll.pharmacy_payroll.attendance.service import AttendanceSummaryService
from src.pharmacy_payroll.pharmacy_payroll.core.enums import AttendanceStatus, PeriodHalf


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date):
        self.last_args = {"employee_id": employee_id, "start_date": start_date, "end_date": end_date}
        return [r for r in self._rows if r.employee_id == employee_id]


def test_summarize_uses_store_range():
    repo = FakeAttendanceRepo(
        [
            AttendanceRecord("E-1", "2025-01-01", AttendanceStatus.PRESENT, "08:00", "17:00"),
            AttendanceRecord("E-2", "2025-01-01", AttendanceStatus.PRESENT, "08:00", "16:00"),
        ]
    )
    svc = AttendanceSummaryService(repo)

    agg = svc.summarize("E-1", start=date(2025, 1, 1), end=date(2025, 1, 15))

    assert repo.last_args == {"employee_id": "E-1", "start_date": date(2025, 1, 1), "end_date": date(2025, 1, 15)}
    assert agg.days_worked == 1
    assert agg.day_overtime_hours == pytest.approx(1)


def test_summarize_second_half_runs_to_month_end():
    repo = FakeAttendanceRepo([])
    svc = AttendanceSummaryService(repo)

    svc.summarize_half("E-1", year=2024, month=2, half=PeriodHalf.SECOND)

    assert repo.last_args["start_date"] == date(2024, 2, 16)
    assert repo.last_args["end_date"] == date(2024, 2, 29)
