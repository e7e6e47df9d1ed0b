from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceSummaryService
from .core.constants import DEFAULT_EXCHANGE_RATE_TIMEOUT, DEFAULT_FALLBACK_EXCHANGE_RATE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .payroll.calculator.lottt_calculator import LotttPayrollCalculator
from .payroll.exchange_rate import DEFAULT_RATE_URL, DolarApiRateClient
from .payroll.mysql_parameters_repository import MySQLPayParametersRepository
from .payroll.repository import PayParametersRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    parameters_repo: PayParametersRepository

    attendance_summary_service: AttendanceSummaryService
    payroll_service: PayrollService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    parameters_repo: PayParametersRepository,
    rate_client: DolarApiRateClient | None = None,
) -> Container:
    attendance_summary_service = AttendanceSummaryService(attendance_repo)
    payroll_service = PayrollService(
        employees_repo,
        parameters_repo,
        attendance_summary_service,
        calculator=LotttPayrollCalculator(),
        rate_client=rate_client,
    )
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        parameters_repo=parameters_repo,
        attendance_summary_service=attendance_summary_service,
        payroll_service=payroll_service,
    )


def build_container(
    *,
    db_config: dict,
    rate_url: str = DEFAULT_RATE_URL,
    rate_timeout: float = DEFAULT_EXCHANGE_RATE_TIMEOUT,
    fallback_rate: float = DEFAULT_FALLBACK_EXCHANGE_RATE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        parameters_repo=MySQLPayParametersRepository(conn),
        rate_client=DolarApiRateClient(rate_url, timeout=rate_timeout, default_fallback=fallback_rate),
    )
