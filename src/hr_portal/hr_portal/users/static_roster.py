from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..core.enums import Role
from .model import Employee
from .repository import RosterRepository


def employee_from_settings(row: Mapping) -> Employee:
    return Employee(
        employee_id=str(row["id"]),
        full_name=str(row["full_name"]),
        email=str(row.get("email", "")),
        role=Role(row.get("role", Role.EMPLOYEE.value)),
        department=row.get("department"),
        leave_balance=float(row.get("leave_balance", 0)),
    )


class StaticRoster(RosterRepository):
    """Roster loaded once from settings (``EMPLOYEES``)."""

    def __init__(self, employees: Iterable[Employee]):
        self._by_id = {e.employee_id: e for e in employees}

    @classmethod
    def from_settings(cls, rows: Iterable[Mapping]) -> "StaticRoster":
        return cls(employee_from_settings(r) for r in rows)

    def count(self) -> int:
        return len(self._by_id)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(str(employee_id))

