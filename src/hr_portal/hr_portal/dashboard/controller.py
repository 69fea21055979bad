from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..attendance.controller import record_to_json
from ..common.auth import actor_required, admin_required, current_actor
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        stats = container.dashboard_service.compute_stats(container.roster.count())
        return jsonify(asdict(stats))

    @app.route("/api/dashboard/me", methods=["GET"], endpoint="employee_dashboard")
    @actor_required
    def employee_dashboard():
        actor = current_actor()
        employee = container.roster.get_by_id(actor.employee_id)
        summary = container.dashboard_service.employee_summary(
            actor.employee_id,
            leave_balance=employee.leave_balance if employee else 0,
        )
        return jsonify(
            {
                "attendance": record_to_json(summary.attendance),
                "half_days_this_month": summary.half_days_this_month,
                "leave_balance": summary.leave_balance,
            }
        )
