from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

import pandas as pd

from ..attendance.model import PeriodAggregate
from ..attendance.service import AttendanceSummaryService
from ..common.validators import require_number
from ..core.enums import PeriodHalf
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.lottt_calculator import LotttPayrollCalculator
from .exchange_rate import DolarApiRateClient
from .model import PayBreakdown, PayParameters
from .period import PayPeriod, pay_period
from .repository import PayParametersRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollLine:
    employee: Employee
    hours: PeriodAggregate
    pay: PayBreakdown


@dataclass(frozen=True)
class PayrollRun:
    period: PayPeriod
    parameters: PayParameters
    lines: list[PayrollLine]

    @property
    def total_net_pay(self) -> float:
        return sum(line.pay.net_pay for line in self.lines)


def validate_pay_inputs(employee: Employee, parameters: PayParameters) -> None:
    """Presence/numeric checks the calculator deliberately does not make."""
    require_number(employee.foreign_pay, f"foreign_pay of employee {employee.employee_id}")
    if employee.hire_date is None:
        raise ValidationError(f"hire_date of employee {employee.employee_id} is required")
    require_number(parameters.exchange_rate, "exchange_rate")
    require_number(parameters.meal_voucher_foreign, "meal_voucher_foreign")
    require_number(parameters.minimum_wage, "minimum_wage")
    require_number(parameters.base_vacation_days, "base_vacation_days")
    require_number(parameters.annual_profit_share_days, "annual_profit_share_days")


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        parameters: PayParametersRepository,
        attendance: AttendanceSummaryService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        rate_client: Optional[DolarApiRateClient] = None,
    ):
        self._employees = employees
        self._parameters = parameters
        self._attendance = attendance
        self._calculator = calculator or LotttPayrollCalculator()
        self._rate_client = rate_client or DolarApiRateClient()

    def run(self, *, year: int, month: int, half: PeriodHalf, as_of: Optional[date] = None) -> PayrollRun:
        period = pay_period(year, month, half)
        as_of = as_of or date.today()

        # One read of configuration and employees per run.
        parameters = self._parameters.get_current()
        employees = [e for e in self._employees.list_active() if e.is_active]

        lines: list[PayrollLine] = []
        for employee in employees:
            validate_pay_inputs(employee, parameters)
            hours = self._attendance.summarize(employee.employee_id, start=period.start, end=period.end)
            pay = self._calculator.calculate(employee, parameters, period.days, period.half, as_of=as_of)
            lines.append(PayrollLine(employee=employee, hours=hours, pay=pay))

        logger.info("payroll run %s: %d employees, rate=%s", period.label, len(lines), parameters.exchange_rate)
        return PayrollRun(period=period, parameters=parameters, lines=lines)

    def refresh_exchange_rate(self) -> float:
        """Fetch the official rate, keeping the configured one on failure."""
        current = self._parameters.get_current().exchange_rate
        rate = self._rate_client.fetch_rate(fallback=current)
        if rate != current:
            self._parameters.update_exchange_rate(rate)
            logger.info("exchange rate updated %s -> %s", current, rate)
        return rate


def run_to_rows(run: PayrollRun) -> list[dict]:
    rows = []
    for line in run.lines:
        p = line.pay
        h = line.hours
        rows.append(
            {
                "employee_id": line.employee.employee_id,
                "full_name": line.employee.full_name,
                "period": run.period.label,
                "days_worked": h.days_worked,
                "normal_hours": h.normal_hours,
                "day_overtime_hours": h.day_overtime_hours,
                "night_overtime_hours": h.night_overtime_hours,
                "rest_day_hours": h.rest_day_hours,
                "night_premium_hours": h.night_premium_hours,
                "foreign_pay": line.employee.foreign_pay,
                "exchange_rate": p.exchange_rate,
                "period_pay": p.period_pay,
                "integral_daily_pay": p.integral_daily_pay,
                "ivss": p.ivss_deduction,
                "spf": p.spf_deduction,
                "faov": p.faov_deduction,
                "meal_voucher": p.meal_voucher_allowance,
                "net_pay": p.net_pay,
            }
        )
    return rows


def export_excel(run: PayrollRun) -> bytes:
    df = pd.DataFrame(run_to_rows(run))

    # Build the workbook in memory.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Nomina")
    return output.getvalue()
