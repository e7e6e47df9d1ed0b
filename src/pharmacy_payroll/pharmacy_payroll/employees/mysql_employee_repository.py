from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, nombre, apellido, cargo, fecha_ingreso, salario_usd, salario_base_vef, activo, sucursal_id"


def _to_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def _row_to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        first_name=r["nombre"],
        last_name=r["apellido"],
        position=r.get("cargo"),
        hire_date=r["fecha_ingreso"],
        foreign_pay=_to_float(r["salario_usd"]),
        local_base_pay=_to_float(r["salario_base_vef"]),
        is_active=bool(r.get("activo", True)),
        branch_id=str(r["sucursal_id"]) if r.get("sucursal_id") is not None else None,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM empleados WHERE activo=1 ORDER BY apellido, nombre")
            return [_row_to_employee(r) for r in fetchall(cur)]
