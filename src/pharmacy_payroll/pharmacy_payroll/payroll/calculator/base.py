from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ...core.enums import PeriodHalf
from ...employees.model import Employee
from ..model import PayBreakdown, PayParameters


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        parameters: PayParameters,
        period_days: float,
        period_half: PeriodHalf,
        *,
        as_of: date,
    ) -> PayBreakdown:
        raise NotImplementedError
