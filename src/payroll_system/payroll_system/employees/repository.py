from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note: the payroll service depends on this interface, not on a concrete storage.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees in insertion order."""

        raise NotImplementedError

    def add(self, employee: Employee) -> None:
        raise NotImplementedError
