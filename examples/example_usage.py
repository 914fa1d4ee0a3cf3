"""Example: use the service layer without the menu loop.

Goal: show that the console controller is a thin layer; pay rules and the
report live in the model and the registry.
"""

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.core.enums import EmployeeType


def main():
    container = build_container()
    factory = container.employee_factory
    registry = container.payroll_registry

    registry.add_employee(factory.create(EmployeeType.FULL_TIME, employee_id=1, name="Alice", fixed_salary=5000.0))
    registry.add_employee(
        factory.create(EmployeeType.PART_TIME, employee_id=2, name="Bob", hourly_rate=20.0, hours_worked=10)
    )
    registry.add_employee(
        factory.create(
            EmployeeType.CONTRACTUAL, employee_id=3, name="Chen", payment_per_project=750.0, projects_completed=4
        )
    )
    print(registry.render_report(), end="")


if __name__ == "__main__":
    main()
