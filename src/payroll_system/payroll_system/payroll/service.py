from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import REPORT_HEADER
from ..core.exceptions import DuplicateEmployeeError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


class PayrollRegistry:
    """Use case: keep the session's employees and render the payroll report."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def __len__(self) -> int:
        return len(self._employees.list_all())

    def is_duplicate_id(self, employee_id: int) -> bool:
        return self._employees.get_by_id(employee_id) is not None

    def add_employee(self, employee: Employee) -> None:
        if self.is_duplicate_id(employee.employee_id):
            raise DuplicateEmployeeError(employee.employee_id)

        self._employees.add(employee)
        logger.info(
            "Added %s employee id=%s salary=%.2f",
            employee.employee_type.value,
            employee.employee_id,
            employee.computed_salary,
        )

    def get(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def render_report(self) -> str:
        """Header, then every employee in insertion order, each followed by a blank line."""

        lines = [REPORT_HEADER]
        for employee in self._employees.list_all():
            lines.append(employee.render())
            lines.append("")
        return "\n".join(lines) + "\n"
