class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEmployeeError(ValidationError):
    """Raised when an employee id is already registered."""

    def __init__(self, employee_id: int):
        super().__init__(f"Employee id {employee_id} already exists")
        self.employee_id = employee_id


class InputExhaustedError(DomainError):
    """Raised when the console input stream has no more lines."""
