from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, PeriodAggregate
from .shift_classifier import classify_shift


def aggregate_period(records: Iterable[AttendanceRecord]) -> PeriodAggregate:
    """Sum classified hours over the given records.

    Rows that are not computable (not present, or missing a clock time) only
    feed the status counters. No date filtering happens here.
    """
    normal = day_ot = night_ot = rest = premium = 0.0
    days_worked = absences = medical = vacation = 0
    closed = False

    for r in records:
        closed = closed or bool(r.closed)
        if r.status == AttendanceStatus.ABSENT:
            absences += 1
        elif r.status == AttendanceStatus.MEDICAL_LEAVE:
            medical += 1
        elif r.status == AttendanceStatus.VACATION:
            vacation += 1

        if not r.is_computable:
            continue

        b = classify_shift(r.clock_in, r.clock_out, r.work_date)
        normal += b.normal_hours
        day_ot += b.day_overtime_hours
        night_ot += b.night_overtime_hours
        rest += b.rest_day_hours
        premium += b.night_premium_hours
        days_worked += 1

    return PeriodAggregate(
        normal_hours=normal,
        day_overtime_hours=day_ot,
        night_overtime_hours=night_ot,
        rest_day_hours=rest,
        night_premium_hours=premium,
        days_worked=days_worked,
        absences=absences,
        medical_leave_days=medical,
        vacation_days=vacation,
        is_closed=closed,
    )
