from datetime import date

from src.pharmacy_payroll.pharmacy_payroll.core.enums import PeriodHalf
from src.pharmacy_payroll.pharmacy_payroll.payroll.period import pay_period


def test_first_half_bounds():
    p = pay_period(2025, 3, PeriodHalf.FIRST)

    assert (p.start, p.end, p.days) == (date(2025, 3, 1), date(2025, 3, 15), 15)
    assert p.label == "2025-03 Q1"


def test_second_half_bounds_follow_month_length():
    assert pay_period(2025, 1, PeriodHalf.SECOND).end == date(2025, 1, 31)
    assert pay_period(2025, 4, PeriodHalf.SECOND).end == date(2025, 4, 30)
    assert pay_period(2023, 2, PeriodHalf.SECOND).end == date(2023, 2, 28)
    assert pay_period(2024, 2, PeriodHalf.SECOND).end == date(2024, 2, 29)
    assert pay_period(2024, 2, 2).days == 15


def test_half_for_day():
    assert PeriodHalf.for_day(1) == PeriodHalf.FIRST
    assert PeriodHalf.for_day(15) == PeriodHalf.FIRST
    assert PeriodHalf.for_day(16) == PeriodHalf.SECOND
