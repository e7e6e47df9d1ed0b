"""Example: classify a few shifts and price one half-month, without Flask or MySQL.

The engine is plain functions over dataclasses; the services only add I/O.
"""

from datetime import date

from src.pharmacy_payroll.pharmacy_payroll.attendance.aggregator import aggregate_period
from src.pharmacy_payroll.pharmacy_payroll.attendance.model import AttendanceRecord
from src.pharmacy_payroll.pharmacy_payroll.core.enums import AttendanceStatus, PeriodHalf
from src.pharmacy_payroll.pharmacy_payroll.employees.model import Employee
from src.pharmacy_payroll.pharmacy_payroll.payroll.calculator.lottt_calculator import calculate_payroll
from src.pharmacy_payroll.pharmacy_payroll.payroll.model import PayParameters


def main():
    records = [
        AttendanceRecord("E-1", "2025-03-05", AttendanceStatus.PRESENT, "08:00", "16:00"),
        AttendanceRecord("E-1", "2025-03-04", AttendanceStatus.PRESENT, "14:00", "23:00"),
        AttendanceRecord("E-1", "2025-03-06", AttendanceStatus.PRESENT, "20:00", "05:00"),
        AttendanceRecord("E-1", "2025-03-08", AttendanceStatus.PRESENT, "09:00", "17:00"),
        AttendanceRecord("E-1", "2025-03-07", AttendanceStatus.ABSENT),
    ]
    print(aggregate_period(records).to_dict())

    employee = Employee(
        employee_id="E-1",
        first_name="Ana",
        last_name="Pérez",
        foreign_pay=500,
        local_base_pay=130,
        hire_date=date(2020, 1, 10),
    )
    params = PayParameters(exchange_rate=40, meal_voucher_foreign=40, minimum_wage=130)
    pay = calculate_payroll(employee, params, 15, PeriodHalf.SECOND, as_of=date(2025, 3, 31))
    print(pay.to_dict())


if __name__ == "__main__":
    main()
