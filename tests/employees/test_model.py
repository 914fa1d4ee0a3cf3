import pytest

from src.payroll_system.payroll_system.core.enums import EmployeeType
from src.payroll_system.payroll_system.employees.model import (
    ContractualEmployee,
    Employee,
    FullTimeEmployee,
    PartTimeEmployee,
)


def test_employee_is_abstract():
    with pytest.raises(TypeError):
        Employee(employee_id=1, name="A")


def test_salary_is_zero_until_pay_computed():
    emp = PartTimeEmployee(employee_id=2, name="Bob", hourly_rate=20.0, hours_worked=10)

    assert emp.computed_salary == 0.0
    assert emp.compute_pay() == 200.0
    assert emp.computed_salary == 200.0


def test_full_time_pay_is_fixed_salary():
    emp = FullTimeEmployee(employee_id=1, name="Alice", fixed_salary=5000.0)
    emp.compute_pay()

    assert emp.computed_salary == 5000.0
    assert emp.employee_type == EmployeeType.FULL_TIME


def test_part_time_pay_is_exact_product():
    emp = PartTimeEmployee(employee_id=3, name="C", hourly_rate=12.1, hours_worked=3)
    emp.compute_pay()

    assert emp.computed_salary == 12.1 * 3


def test_contractual_pay_is_exact_product():
    emp = ContractualEmployee(employee_id=4, name="D", payment_per_project=333.3, projects_completed=7)
    emp.compute_pay()

    assert emp.computed_salary == 333.3 * 7
    assert emp.employee_type == EmployeeType.CONTRACTUAL


def test_compute_pay_is_repeatable():
    emp = ContractualEmployee(employee_id=4, name="D", payment_per_project=100.0, projects_completed=2)

    assert emp.compute_pay() == emp.compute_pay() == 200.0


def test_render_full_time():
    emp = FullTimeEmployee(employee_id=1, name="Alice", fixed_salary=5000.0)
    emp.compute_pay()

    assert emp.render() == "Employee: Alice (ID: 1)\nFixed Monthly Salary: $5000.00"


def test_render_part_time():
    emp = PartTimeEmployee(employee_id=2, name="Bob", hourly_rate=20.0, hours_worked=10)
    emp.compute_pay()

    assert emp.render().splitlines() == [
        "Employee: Bob (ID: 2)",
        "Hourly Wage: $20.00",
        "Hours Worked: 10",
        "Total Salary: $200.00",
    ]


def test_render_contractual_with_empty_name():
    emp = ContractualEmployee(employee_id=7, name="", payment_per_project=1500.5, projects_completed=2)
    emp.compute_pay()

    assert emp.render().splitlines() == [
        "Employee:  (ID: 7)",
        "Contract Payment Per Project: $1500.50",
        "Projects Completed: 2",
        "Total Salary: $3001.00",
    ]


def test_render_rounds_for_display_only():
    emp = FullTimeEmployee(employee_id=1, name="Alice", fixed_salary=1234.567)
    emp.compute_pay()

    assert "Fixed Monthly Salary: $1234.57" in emp.render()
    assert emp.fixed_salary == 1234.567
    assert emp.computed_salary == 1234.567
