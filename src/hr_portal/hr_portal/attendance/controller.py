from __future__ import annotations

from flask import Flask, jsonify

from ..common.auth import actor_required, current_actor
from ..common.datetime_utils import format_iso_datetime
from ..container import Container
from .model import AttendanceRecord


def record_to_json(rec: AttendanceRecord) -> dict:
    return {
        "employee_id": rec.employee_id,
        "date": rec.work_date.isoformat(),
        "punch_in": format_iso_datetime(rec.punch_in_time),
        "punch_out": format_iso_datetime(rec.punch_out_time),
        "status": rec.status.value,
        "disconnection_count": rec.disconnection_count,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/punch", methods=["POST"], endpoint="attendance_punch")
    @actor_required
    def punch():
        rec = container.attendance_service.punch(current_actor().employee_id)
        return jsonify(record_to_json(rec))

    @app.route("/api/attendance/disconnections", methods=["POST"], endpoint="attendance_disconnection")
    @actor_required
    def record_disconnection():
        rec = container.attendance_service.record_disconnection(current_actor().employee_id)
        return jsonify(record_to_json(rec))

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @actor_required
    def today():
        rec = container.attendance_service.get_today(current_actor().employee_id)
        return jsonify(record_to_json(rec))
