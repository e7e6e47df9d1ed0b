from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import whole_years_between


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Pure data object. foreign_pay is the USD reference salary,
    local_base_pay the VEF base shown on the employee record.
    """

    employee_id: str
    first_name: str
    last_name: str
    foreign_pay: float
    local_base_pay: float
    hire_date: date
    is_active: bool = True
    position: Optional[str] = None
    branch_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def seniority_years(self, as_of: date) -> int:
        """Completed years of service at as_of; never stored."""
        return whole_years_between(self.hire_date, as_of)
