from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import AttendanceStatus, ShiftType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per employee per calendar date."""

    employee_id: str
    work_date: Union[date, str]
    status: AttendanceStatus
    clock_in: Optional[str] = None
    clock_out: Optional[str] = None
    closed: bool = False
    note: Optional[str] = None

    @property
    def is_computable(self) -> bool:
        return self.status == AttendanceStatus.PRESENT and bool(self.clock_in) and bool(self.clock_out)


@dataclass(frozen=True)
class ShiftBreakdown:
    """Classified hours of a single shift.

    normal/day-overtime/night-overtime are disjoint and add up to the duration
    on working days; on rest days the whole duration is rest_day_hours.
    night_premium_hours is an additive premium base, not a fifth bucket.
    """

    normal_hours: float = 0.0
    day_overtime_hours: float = 0.0
    night_overtime_hours: float = 0.0
    rest_day_hours: float = 0.0
    night_premium_hours: float = 0.0
    shift_type: ShiftType = ShiftType.DIURNAL
    duration: float = 0.0


@dataclass(frozen=True)
class PeriodAggregate:
    """Sum of shift breakdowns for one employee over a date range."""

    normal_hours: float = 0.0
    day_overtime_hours: float = 0.0
    night_overtime_hours: float = 0.0
    rest_day_hours: float = 0.0
    night_premium_hours: float = 0.0
    days_worked: int = 0
    absences: int = 0
    medical_leave_days: int = 0
    vacation_days: int = 0
    is_closed: bool = False

    @property
    def total_hours(self) -> float:
        return self.normal_hours + self.day_overtime_hours + self.night_overtime_hours + self.rest_day_hours

    def to_dict(self) -> dict:
        return {
            "normal_hours": self.normal_hours,
            "day_overtime_hours": self.day_overtime_hours,
            "night_overtime_hours": self.night_overtime_hours,
            "rest_day_hours": self.rest_day_hours,
            "night_premium_hours": self.night_premium_hours,
            "total_hours": self.total_hours,
            "days_worked": self.days_worked,
            "absences": self.absences,
            "medical_leave_days": self.medical_leave_days,
            "vacation_days": self.vacation_days,
            "is_closed": self.is_closed,
        }
