from __future__ import annotations

from typing import Any, Optional

from ..core.constants import DEFAULT_BASE_VACATION_DAYS, DEFAULT_PROFIT_SHARE_DAYS
from ..core.exceptions import ConfigurationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import PayParameters
from .repository import PayParametersRepository


def _to_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None:
        return default
    return float(value)


class MySQLPayParametersRepository(PayParametersRepository):
    """Reads the single-row global configuration table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_current(self) -> PayParameters:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT tasa_bcv, cestaticket_usd, salario_minimo_vef, dias_bono_vacacional, dias_utilidades
                FROM configuracion_global
                ORDER BY updated_at DESC
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                raise ConfigurationError("No global pay configuration found")
            return PayParameters(
                exchange_rate=_to_float(r["tasa_bcv"]),
                meal_voucher_foreign=_to_float(r["cestaticket_usd"]),
                minimum_wage=_to_float(r["salario_minimo_vef"]),
                base_vacation_days=_to_float(r.get("dias_bono_vacacional"), DEFAULT_BASE_VACATION_DAYS),
                annual_profit_share_days=_to_float(r.get("dias_utilidades"), DEFAULT_PROFIT_SHARE_DAYS),
            )

    def update_exchange_rate(self, rate: float) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE configuracion_global SET tasa_bcv=%s, updated_at=NOW()",
                (float(rate),),
            )
