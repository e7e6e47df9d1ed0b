from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import ValidationError


def _parse_date(value: str, field_name: str) -> date:
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}") from None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<employee_id>/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary(employee_id: str):
        today = date.today()
        start_default = today.replace(day=1)

        start = _parse_date(request.args.get("start") or start_default.strftime("%Y-%m-%d"), "start")
        end = _parse_date(request.args.get("end") or today.strftime("%Y-%m-%d"), "end")

        aggregate = container.attendance_summary_service.summarize(employee_id, start=start, end=end)
        return jsonify(
            {
                "success": True,
                "employee_id": employee_id,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "summary": aggregate.to_dict(),
            }
        )
