from __future__ import annotations

from datetime import date

from ...core.constants import (
    ACCRUAL_DIVISOR_DAYS,
    DEDUCTION_CAP_MINIMUM_WAGES,
    FAOV_RATE,
    IVSS_RATE,
    MAX_VACATION_BONUS_DAYS,
    MONTHLY_DIVISOR_DAYS,
    SPF_RATE,
)
from ...core.enums import PeriodHalf
from ...employees.model import Employee
from ..model import PayBreakdown, PayParameters
from .base import PayrollCalculator


def vacation_bonus_days(base_days: float, seniority_years: int) -> float:
    """Base days plus one per year of service after the first, capped at 30."""
    return min(MAX_VACATION_BONUS_DAYS, base_days + max(0, seniority_years - 1))


class LotttPayrollCalculator(PayrollCalculator):
    """Venezuelan payroll rules: 30-day month, IVSS/SPF capped at five
    minimum wages, FAOV on the full period pay, meal voucher paid in Q2.

    No input validation and no rounding: a zero exchange rate or a missing
    field must be caught by the caller, not coerced here.
    """

    def calculate(
        self,
        employee: Employee,
        parameters: PayParameters,
        period_days: float,
        period_half: PeriodHalf,
        *,
        as_of: date,
    ) -> PayBreakdown:
        rate = parameters.exchange_rate
        monthly_local_pay = employee.foreign_pay * rate
        daily_normal_pay = monthly_local_pay / MONTHLY_DIVISOR_DAYS
        period_pay = daily_normal_pay * period_days

        years = employee.seniority_years(as_of)
        bonus_days = vacation_bonus_days(parameters.base_vacation_days, years)
        vacation_daily = (daily_normal_pay * bonus_days) / ACCRUAL_DIVISOR_DAYS
        profit_share_daily = (daily_normal_pay * parameters.annual_profit_share_days) / ACCRUAL_DIVISOR_DAYS
        integral_daily_pay = daily_normal_pay + vacation_daily + profit_share_daily

        cap = parameters.minimum_wage * DEDUCTION_CAP_MINIMUM_WAGES
        taxable_base = min(period_pay, (cap / MONTHLY_DIVISOR_DAYS) * period_days)

        ivss = taxable_base * IVSS_RATE
        spf = taxable_base * SPF_RATE
        faov = period_pay * FAOV_RATE
        total_deductions = ivss + spf + faov

        half = PeriodHalf(period_half)
        meal_voucher = parameters.meal_voucher_foreign * rate if half is PeriodHalf.SECOND else 0.0

        return PayBreakdown(
            exchange_rate=rate,
            monthly_local_pay=monthly_local_pay,
            daily_normal_pay=daily_normal_pay,
            period_days=period_days,
            period_half=half,
            period_pay=period_pay,
            seniority_years=years,
            vacation_bonus_days=bonus_days,
            vacation_accrual_daily=vacation_daily,
            profit_share_accrual_daily=profit_share_daily,
            integral_daily_pay=integral_daily_pay,
            deduction_cap=cap,
            taxable_base=taxable_base,
            ivss_deduction=ivss,
            spf_deduction=spf,
            faov_deduction=faov,
            total_deductions=total_deductions,
            meal_voucher_allowance=meal_voucher,
            net_pay=period_pay + meal_voucher - total_deductions,
        )


_DEFAULT_CALCULATOR = LotttPayrollCalculator()


def calculate_payroll(
    employee: Employee,
    parameters: PayParameters,
    period_days: float,
    period_half: PeriodHalf,
    *,
    as_of: date,
) -> PayBreakdown:
    return _DEFAULT_CALCULATOR.calculate(employee, parameters, period_days, period_half, as_of=as_of)
