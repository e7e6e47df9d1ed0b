from __future__ import annotations

import logging
from datetime import date

from ..core.enums import PeriodHalf
from ..payroll.period import pay_period
from .aggregator import aggregate_period
from .model import PeriodAggregate
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceSummaryService:
    """Reads attendance rows once and aggregates classified hours."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def summarize(self, employee_id: str, *, start: date, end: date) -> PeriodAggregate:
        records = self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)
        aggregate = aggregate_period(records)
        skipped = len(records) - aggregate.days_worked
        logger.debug(
            "attendance summary employee=%s %s..%s rows=%d computable=%d skipped=%d",
            employee_id, start, end, len(records), aggregate.days_worked, skipped,
        )
        return aggregate

    def summarize_half(self, employee_id: str, *, year: int, month: int, half: PeriodHalf) -> PeriodAggregate:
        period = pay_period(year, month, half)
        return self.summarize(employee_id, start=period.start, end=period.end)
