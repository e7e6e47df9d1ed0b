from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_clock
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT empleado_id, fecha, estado, hora_entrada, hora_salida, cerrado, observaciones
                FROM asistencias
                WHERE empleado_id=%s AND fecha BETWEEN %s AND %s
                ORDER BY fecha ASC
                """,
                (employee_id, start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    employee_id=str(r["empleado_id"]),
                    work_date=r["fecha"],
                    status=_to_status(r["estado"]),
                    clock_in=format_clock(r.get("hora_entrada")),
                    clock_out=format_clock(r.get("hora_salida")),
                    closed=bool(r.get("cerrado") or False),
                    note=r.get("observaciones"),
                )
                for r in rows
            ]


_STATUS_BY_DB_VALUE = {
    "presente": AttendanceStatus.PRESENT,
    "falta": AttendanceStatus.ABSENT,
    "reposo": AttendanceStatus.MEDICAL_LEAVE,
    "vacaciones": AttendanceStatus.VACATION,
}


def _to_status(value: str) -> AttendanceStatus:
    status = _STATUS_BY_DB_VALUE.get(value)
    if status is not None:
        return status
    return AttendanceStatus(value)
