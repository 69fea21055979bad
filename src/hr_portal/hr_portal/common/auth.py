"""Actor gate for controllers.

The upstream authentication gateway verifies the caller and forwards the
identity in headers; this module only reads it.
"""

from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import Actor

EMPLOYEE_ID_HEADER = "X-Employee-Id"
EMPLOYEE_NAME_HEADER = "X-Employee-Name"
EMPLOYEE_ROLE_HEADER = "X-Employee-Role"


def _actor_from_headers() -> Actor | None:
    employee_id = (request.headers.get(EMPLOYEE_ID_HEADER) or "").strip()
    name = (request.headers.get(EMPLOYEE_NAME_HEADER) or "").strip()
    role_raw = (request.headers.get(EMPLOYEE_ROLE_HEADER) or "").strip().lower()
    if not employee_id or not name:
        return None
    try:
        role = Role(role_raw or Role.EMPLOYEE.value)
    except ValueError:
        return None
    return Actor(employee_id=employee_id, name=name, role=role)


def current_actor() -> Actor:
    return g.actor


def actor_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        actor = _actor_from_headers()
        if actor is None:
            return jsonify({"error": "unauthenticated", "message": "Missing actor identity"}), 401
        g.actor = actor
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    @actor_required
    def wrapper(*args, **kwargs):
        if not current_actor().is_reviewer:
            raise AuthorizationError("Only reviewers can access this resource")
        return view(*args, **kwargs)

    return wrapper
