from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import actor_required, admin_required, current_actor
from ..container import Container
from ..core.enums import RequestStatus
from .model import LeaveRequest, RegularizationRequest


def leave_to_json(r: LeaveRequest) -> dict:
    return {
        "id": r.request_id,
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "type": r.leave_type.value,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "days": r.days,
        "reason": r.reason,
        "status": r.status.value,
        "submitted_at": r.submitted_at.isoformat(),
    }


def regularization_to_json(r: RegularizationRequest) -> dict:
    return {
        "id": r.request_id,
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "for_date": r.for_date.isoformat(),
        "type": r.issue_type.value,
        "reason": r.reason,
        "status": r.status.value,
        "submitted_at": r.submitted_at.isoformat(),
    }


def register(app: Flask, container: Container) -> None:
    svc = container.request_service

    def _body() -> dict:
        return request.get_json(silent=True) or {}

    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    @actor_required
    def submit_leave():
        data = _body()
        actor = current_actor()
        rid = svc.submit_leave(
            employee_id=actor.employee_id,
            employee_name=actor.name,
            leave_type=data.get("type"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            reason=data.get("reason", ""),
        )
        return jsonify({"id": rid, "status": RequestStatus.PENDING.value}), 201

    @app.route("/api/leaves", methods=["GET"], endpoint="my_leaves")
    @actor_required
    def my_leaves():
        items = svc.leaves.list_for_employee(current_actor().employee_id)
        return jsonify([leave_to_json(r) for r in items])

    @app.route("/api/regularizations", methods=["POST"], endpoint="submit_regularization")
    @actor_required
    def submit_regularization():
        data = _body()
        actor = current_actor()
        rid = svc.submit_regularization(
            employee_id=actor.employee_id,
            employee_name=actor.name,
            for_date=data.get("for_date"),
            issue_type=data.get("type"),
            reason=data.get("reason", ""),
        )
        return jsonify({"id": rid, "status": RequestStatus.PENDING.value}), 201

    @app.route("/api/regularizations", methods=["GET"], endpoint="my_regularizations")
    @actor_required
    def my_regularizations():
        items = svc.regularizations.list_for_employee(current_actor().employee_id)
        return jsonify([regularization_to_json(r) for r in items])

    @app.route("/api/admin/leaves/pending", methods=["GET"], endpoint="pending_leaves")
    @admin_required
    def pending_leaves():
        return jsonify([leave_to_json(r) for r in svc.list_pending_leaves()])

    @app.route("/api/admin/regularizations/pending", methods=["GET"], endpoint="pending_regularizations")
    @admin_required
    def pending_regularizations():
        return jsonify([regularization_to_json(r) for r in svc.list_pending_regularizations()])

    @app.route("/api/admin/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(request_id: int):
        svc.resolve_leave(request_id, RequestStatus.APPROVED)
        return jsonify({"id": request_id, "status": RequestStatus.APPROVED.value})

    @app.route("/api/admin/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(request_id: int):
        svc.resolve_leave(request_id, RequestStatus.REJECTED)
        return jsonify({"id": request_id, "status": RequestStatus.REJECTED.value})

    @app.route(
        "/api/admin/regularizations/<int:request_id>/approve",
        methods=["POST"],
        endpoint="approve_regularization",
    )
    @admin_required
    def approve_regularization(request_id: int):
        svc.resolve_regularization(request_id, RequestStatus.APPROVED)
        return jsonify({"id": request_id, "status": RequestStatus.APPROVED.value})

    @app.route(
        "/api/admin/regularizations/<int:request_id>/reject",
        methods=["POST"],
        endpoint="reject_regularization",
    )
    @admin_required
    def reject_regularization(request_id: int):
        svc.resolve_regularization(request_id, RequestStatus.REJECTED)
        return jsonify({"id": request_id, "status": RequestStatus.REJECTED.value})
