from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from .console.controller import MenuController
from .console.prompter import Prompter
from .employees.factory import EmployeeFactory
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .payroll.service import PayrollRegistry


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository

    employee_factory: EmployeeFactory
    payroll_registry: PayrollRegistry

    prompter: Prompter
    menu_controller: MenuController


def build_container(*, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> Container:
    employees_repo = InMemoryEmployeeRepository()

    employee_factory = EmployeeFactory()
    payroll_registry = PayrollRegistry(employees_repo)

    prompter = Prompter(stdin, stdout)
    menu_controller = MenuController(prompter, payroll_registry, factory=employee_factory)

    return Container(
        employees_repo=employees_repo,
        employee_factory=employee_factory,
        payroll_registry=payroll_registry,
        prompter=prompter,
        menu_controller=menu_controller,
    )
