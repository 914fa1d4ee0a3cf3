from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import EmployeeType
from ..core.exceptions import ValidationError
from .model import ContractualEmployee, Employee, FullTimeEmployee, PartTimeEmployee

_VARIANTS: dict[EmployeeType, type[Employee]] = {
    EmployeeType.FULL_TIME: FullTimeEmployee,
    EmployeeType.PART_TIME: PartTimeEmployee,
    EmployeeType.CONTRACTUAL: ContractualEmployee,
}


@dataclass
class EmployeeFactory:
    """Factory Pattern: build the variant for a payment category, pay already computed."""

    def create(self, employee_type: EmployeeType, *, employee_id: int, name: str, **fields: Any) -> Employee:
        try:
            employee_type = EmployeeType(employee_type)
        except ValueError:
            raise ValidationError(f"Unknown employee type: {employee_type!r}") from None
        variant = _VARIANTS[employee_type]

        try:
            employee = variant(employee_id=employee_id, name=name, **fields)
        except TypeError as e:
            raise ValidationError(f"Invalid fields for {employee_type.value}: {e}") from e

        employee.compute_pay()
        return employee
