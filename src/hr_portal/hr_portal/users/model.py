from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    employee_id: str
    full_name: str
    email: str
    role: Role
    department: Optional[str] = None
    leave_balance: float = 0


@dataclass(frozen=True)
class Actor:
    """Verified identity handed over by the authentication layer."""

    employee_id: str
    name: str
    role: Role

    @property
    def is_reviewer(self) -> bool:
        return self.role == Role.ADMIN
