from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import last_day_of_month
from ..core.constants import HALF_PERIOD_DAYS
from ..core.enums import PeriodHalf


@dataclass(frozen=True)
class PayPeriod:
    year: int
    month: int
    half: PeriodHalf
    start: date
    end: date
    days: int = HALF_PERIOD_DAYS

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d} Q{int(self.half)}"


def pay_period(year: int, month: int, half: PeriodHalf) -> PayPeriod:
    """Q1 runs from day 1 to 15, Q2 from day 16 to the end of the month.

    Both halves pay 15 days under the 30-day month convention, whatever
    the calendar length.
    """
    half = PeriodHalf(half)
    if half is PeriodHalf.FIRST:
        start, end = date(year, month, 1), date(year, month, 15)
    else:
        start, end = date(year, month, 16), date(year, month, last_day_of_month(year, month))
    return PayPeriod(year=year, month=month, half=half, start=start, end=end)
