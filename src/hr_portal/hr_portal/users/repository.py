from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class RosterRepository(Protocol):
    """Employee roster owned outside the core; read-only from here."""

    def count(self) -> int:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError
