from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError
