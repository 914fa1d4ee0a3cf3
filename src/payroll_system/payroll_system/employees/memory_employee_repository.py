from __future__ import annotations

from typing import Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Ordered list of employees for one session; lookups are linear scans."""

    def __init__(self) -> None:
        self._employees: list[Employee] = []

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.employee_id == employee_id:
                return employee
        return None

    def list_all(self) -> Sequence[Employee]:
        return tuple(self._employees)

    def add(self, employee: Employee) -> None:
        self._employees.append(employee)
