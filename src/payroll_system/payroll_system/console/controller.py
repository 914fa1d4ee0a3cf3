from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..common.validators import parse_int
from ..core import constants as c
from ..core.enums import EmployeeType, MenuChoice
from ..core.exceptions import InputExhaustedError, ValidationError
from ..employees.factory import EmployeeFactory
from ..employees.model import Employee
from ..payroll.service import PayrollRegistry
from .prompter import Prompter

logger = logging.getLogger(__name__)


class MenuController:
    """Menu loop: read a choice, collect an employee or print the report, until Exit."""

    def __init__(
        self,
        prompter: Prompter,
        registry: PayrollRegistry,
        *,
        factory: Optional[EmployeeFactory] = None,
    ):
        self._prompter = prompter
        self._registry = registry
        self._factory = factory or EmployeeFactory()
        self._handlers: dict[MenuChoice, Callable[[], Any]] = {
            MenuChoice.FULL_TIME: self.collect_full_time,
            MenuChoice.PART_TIME: self.collect_part_time,
            MenuChoice.CONTRACTUAL: self.collect_contractual,
            MenuChoice.REPORT: self.show_report,
        }

    def run(self) -> int:
        """Loop until Exit or end of input. Returns the process exit code."""

        try:
            while self.step():
                pass
        except InputExhaustedError:
            # Unfinished entries are dropped.
            logger.info("Input exhausted, leaving menu loop")
            self._prompter.say(c.FAREWELL_MESSAGE)
        return 0

    def step(self) -> bool:
        """One pass through the menu. Returns False once Exit was chosen."""

        self._prompter.write(c.MENU_TEXT + c.CHOICE_PROMPT)
        choice = self._read_choice()
        if choice is None:
            self._prompter.say(c.INVALID_CHOICE_MESSAGE)
            return True

        if choice is MenuChoice.EXIT:
            self._prompter.say(c.FAREWELL_MESSAGE)
            return False

        self._handlers[choice]()
        return True

    def _read_choice(self) -> Optional[MenuChoice]:
        token = self._prompter.read_token()
        try:
            return MenuChoice(parse_int(token))
        except (ValidationError, ValueError):
            logger.debug("Invalid menu choice %r", token)
            return None

    def collect_full_time(self) -> Optional[Employee]:
        return self._collect(
            EmployeeType.FULL_TIME,
            lambda: {"fixed_salary": self._prompter.read_float(c.SALARY_PROMPT)},
        )

    def collect_part_time(self) -> Optional[Employee]:
        return self._collect(
            EmployeeType.PART_TIME,
            lambda: {
                "hourly_rate": self._prompter.read_float(c.HOURLY_RATE_PROMPT),
                "hours_worked": self._prompter.read_int(c.HOURS_WORKED_PROMPT),
            },
        )

    def collect_contractual(self) -> Optional[Employee]:
        return self._collect(
            EmployeeType.CONTRACTUAL,
            lambda: {
                "payment_per_project": self._prompter.read_float(c.PAYMENT_PER_PROJECT_PROMPT),
                "projects_completed": self._prompter.read_int(c.PROJECTS_COMPLETED_PROMPT),
            },
        )

    def _collect(self, employee_type: EmployeeType, read_fields: Callable[[], dict]) -> Optional[Employee]:
        employee_id = self._prompter.read_int(c.ID_PROMPT)
        if self._registry.is_duplicate_id(employee_id):
            logger.warning("Rejected duplicate employee id %s", employee_id)
            self._prompter.say(c.DUPLICATE_ID_MESSAGE)
            return None

        name = self._prompter.read_line(c.NAME_PROMPT)
        employee = self._factory.create(employee_type, employee_id=employee_id, name=name, **read_fields())
        self._registry.add_employee(employee)
        return employee

    def show_report(self) -> None:
        self._prompter.write(self._registry.render_report())
