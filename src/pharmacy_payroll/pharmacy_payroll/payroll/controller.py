from __future__ import annotations

import io
from datetime import date

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.enums import PeriodHalf
from ..core.exceptions import ValidationError
from .service import export_excel


def _period_args() -> tuple[int, int, PeriodHalf]:
    today = date.today()
    try:
        year = int(request.args.get("year") or today.year)
        month = int(request.args.get("month") or today.month)
        half = PeriodHalf(int(request.args.get("half") or PeriodHalf.for_day(today.day)))
    except ValueError:
        raise ValidationError("year, month and half must be integers (half is 1 or 2)") from None
    if not 1 <= year <= 9999:
        raise ValidationError("year must be between 1 and 9999")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return year, month, half


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/preview", methods=["GET"], endpoint="payroll_preview")
    def payroll_preview():
        year, month, half = _period_args()
        run = container.payroll_service.run(year=year, month=month, half=half)
        return jsonify(
            {
                "success": True,
                "period": {
                    "label": run.period.label,
                    "start": run.period.start.strftime("%Y-%m-%d"),
                    "end": run.period.end.strftime("%Y-%m-%d"),
                    "days": run.period.days,
                },
                "exchange_rate": run.parameters.exchange_rate,
                "total_net_pay": run.total_net_pay,
                "lines": [
                    {
                        "employee_id": line.employee.employee_id,
                        "full_name": line.employee.full_name,
                        "hours": line.hours.to_dict(),
                        "pay": line.pay.to_dict(),
                    }
                    for line in run.lines
                ],
            }
        )

    @app.route("/api/payroll/export", methods=["GET"], endpoint="payroll_export")
    def payroll_export():
        year, month, half = _period_args()
        run = container.payroll_service.run(year=year, month=month, half=half)
        filename = f"nomina_{year:04d}_{month:02d}_q{int(half)}.xlsx"
        return send_file(
            io.BytesIO(export_excel(run)),
            download_name=filename,
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    @app.route("/api/payroll/exchange-rate/refresh", methods=["POST"], endpoint="payroll_refresh_rate")
    def payroll_refresh_rate():
        rate = container.payroll_service.refresh_exchange_rate()
        return jsonify({"success": True, "exchange_rate": rate})
