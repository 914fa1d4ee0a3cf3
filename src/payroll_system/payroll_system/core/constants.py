"""Console texts and formats.

Note: Keep constants here to avoid magic strings spread across code.
"""

MENU_TEXT = (
    "Menu\n"
    "1 - Full-time Employee\n"
    "2 - Part-time Employee\n"
    "3 - Contractual Employee\n"
    "4 - Display Payroll Report\n"
    "5 - Exit\n"
)
CHOICE_PROMPT = "Enter your choice: "

INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a valid number."
INVALID_CHOICE_MESSAGE = "Invalid choice. Please enter a number between 1 and 5."
DUPLICATE_ID_MESSAGE = "Duplicate ID! Please enter a different ID."
FAREWELL_MESSAGE = "Exiting..."

REPORT_HEADER = "--- Employee Payroll Report ---"

MONEY_FORMAT = "${:.2f}"

ID_PROMPT = "Enter ID: "
NAME_PROMPT = "Enter Name: "
SALARY_PROMPT = "Enter Salary: "
HOURLY_RATE_PROMPT = "Enter Hourly Rate: "
HOURS_WORKED_PROMPT = "Enter Hours Worked: "
PAYMENT_PER_PROJECT_PROMPT = "Enter Payment Per Project: "
PROJECTS_COMPLETED_PROMPT = "Enter Projects Completed: "
