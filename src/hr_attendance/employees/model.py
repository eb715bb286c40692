from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


def _parse_role(value) -> Optional[Role]:
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee as seen by the computation engine."""

    employee_id: str
    name: str
    department: str
    employee_number: Optional[str] = None
    role: Optional[Role] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "Employee":
        return cls(
            employee_id=str(payload.get("id") or payload.get("employeeId") or ""),
            name=str(payload.get("name") or ""),
            department=str(payload.get("department") or ""),
            employee_number=payload.get("employeeNumber"),
            role=_parse_role(payload.get("role")),
        )
