from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from ..core.constants import MONEY_FORMAT
from ..core.enums import EmployeeType


def _money(amount: float) -> str:
    return MONEY_FORMAT.format(amount)


@dataclass
class Employee(ABC):
    """Domain entity: an employee that can be paid.

    `computed_salary` stays 0.0 until `compute_pay()` has run.
    """

    employee_type: ClassVar[EmployeeType]

    employee_id: int
    name: str
    computed_salary: float = field(default=0.0, init=False)

    @abstractmethod
    def compute_pay(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def render(self) -> str:
        raise NotImplementedError

    def _heading(self) -> str:
        return f"Employee: {self.name} (ID: {self.employee_id})"


@dataclass
class FullTimeEmployee(Employee):
    """Fixed monthly salary."""

    employee_type: ClassVar[EmployeeType] = EmployeeType.FULL_TIME

    fixed_salary: float

    def compute_pay(self) -> float:
        self.computed_salary = self.fixed_salary
        return self.computed_salary

    def render(self) -> str:
        return "\n".join(
            [
                self._heading(),
                f"Fixed Monthly Salary: {_money(self.fixed_salary)}",
            ]
        )


@dataclass
class PartTimeEmployee(Employee):
    """Paid by the hour: hourly_rate * hours_worked."""

    employee_type: ClassVar[EmployeeType] = EmployeeType.PART_TIME

    hourly_rate: float
    hours_worked: int

    def compute_pay(self) -> float:
        self.computed_salary = self.hourly_rate * self.hours_worked
        return self.computed_salary

    def render(self) -> str:
        return "\n".join(
            [
                self._heading(),
                f"Hourly Wage: {_money(self.hourly_rate)}",
                f"Hours Worked: {self.hours_worked}",
                f"Total Salary: {_money(self.computed_salary)}",
            ]
        )


@dataclass
class ContractualEmployee(Employee):
    """Paid per finished project: payment_per_project * projects_completed."""

    employee_type: ClassVar[EmployeeType] = EmployeeType.CONTRACTUAL

    payment_per_project: float
    projects_completed: int

    def compute_pay(self) -> float:
        self.computed_salary = self.payment_per_project * self.projects_completed
        return self.computed_salary

    def render(self) -> str:
        return "\n".join(
            [
                self._heading(),
                f"Contract Payment Per Project: {_money(self.payment_per_project)}",
                f"Projects Completed: {self.projects_completed}",
                f"Total Salary: {_money(self.computed_salary)}",
            ]
        )
